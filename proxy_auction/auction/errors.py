"""
errors.py: Failures raised while building an auction or placing bids
"""
from proxy_auction.common.money import format_money


class AuctionError(Exception):
    """Base class for every auction failure; all are recoverable by the caller."""


class InvalidAuction(AuctionError, ValueError):
    """Auction data was rejected at construction; no auction exists."""


class InsufficientBidders(InvalidAuction):
    def __init__(self, count):
        self.count = count
        super().__init__(f"auction must have at least two bidders, got {count}")


class DuplicateBidder(InvalidAuction):
    def __init__(self, bidder_id):
        self.bidder_id = bidder_id
        super().__init__(f"duplicate bidder ID detected: {bidder_id}")


class InvalidBidder(InvalidAuction):
    """A single bidder's parameters are out of range."""

    def __init__(self, bidder_id, reason):
        self.bidder_id = bidder_id
        self.reason = reason
        super().__init__(f"invalid bidder data for bidder ID {bidder_id}: {reason}")


class InvalidStartingBid(InvalidBidder):
    def __init__(self, bidder_id, starting_bid):
        self.starting_bid = starting_bid
        super().__init__(bidder_id, f"starting bid must be positive, got {format_money(starting_bid)}")


class InvalidMaxBid(InvalidBidder):
    def __init__(self, bidder_id, max_bid, starting_bid):
        self.max_bid = max_bid
        self.starting_bid = starting_bid
        super().__init__(
            bidder_id,
            f"max bid {format_money(max_bid)} must be greater than or equal to "
            f"starting bid {format_money(starting_bid)}",
        )


class InvalidIncrement(InvalidBidder):
    def __init__(self, bidder_id, auto_increment):
        self.auto_increment = auto_increment
        super().__init__(bidder_id, f"auto-increment must be positive, got {format_money(auto_increment)}")


class InvalidCurrentBid(InvalidBidder):
    def __init__(self, bidder_id, current_bid, starting_bid, max_bid):
        self.current_bid = current_bid
        self.starting_bid = starting_bid
        self.max_bid = max_bid
        super().__init__(
            bidder_id,
            f"current bid {format_money(current_bid)} must be between starting bid "
            f"{format_money(starting_bid)} and max bid {format_money(max_bid)}",
        )


class BidRejected(AuctionError, ValueError):
    """A bid failed validation; auction state is unchanged."""

    def __init__(self, bidder_id, amount, message):
        self.bidder_id = bidder_id
        self.amount = amount
        super().__init__(message)


class UnknownBidder(BidRejected):
    def __init__(self, bidder_id, amount):
        super().__init__(bidder_id, amount, f"bidder {bidder_id} is not part of this auction")


class BidBelowStartingBid(BidRejected):
    def __init__(self, bidder_id, amount, starting_bid):
        self.starting_bid = starting_bid
        super().__init__(
            bidder_id, amount,
            f"bid amount {format_money(amount)} is less than starting bid {format_money(starting_bid)}",
        )


class BidAboveMaxBid(BidRejected):
    def __init__(self, bidder_id, amount, max_bid):
        self.max_bid = max_bid
        super().__init__(
            bidder_id, amount,
            f"bid amount {format_money(amount)} is greater than max bid {format_money(max_bid)}",
        )


class BidNotHigherThanCurrent(BidRejected):
    def __init__(self, bidder_id, amount, current_bid):
        self.current_bid = current_bid
        super().__init__(
            bidder_id, amount,
            f"bid amount {format_money(amount)} is less than or equal to "
            f"current bid {format_money(current_bid)}",
        )


class RoundLimitExceeded(AuctionError, RuntimeError):
    def __init__(self, max_rounds):
        self.max_rounds = max_rounds
        super().__init__(f"proxy bidding did not settle within {max_rounds} rounds")
