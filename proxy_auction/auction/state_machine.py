"""
state_machine.py: Proxy-bidding auction state and its transitions
"""
import logging
import threading
import uuid

from proxy_auction.auction.allocation import select_winner
from proxy_auction.auction.errors import (
    BidAboveMaxBid,
    BidBelowStartingBid,
    BidNotHigherThanCurrent,
    BidRejected,
    DuplicateBidder,
    InsufficientBidders,
    InvalidCurrentBid,
    InvalidIncrement,
    InvalidMaxBid,
    InvalidStartingBid,
    UnknownBidder,
)
from proxy_auction.common.clock import default_clock
from proxy_auction.common.entries import AUTO, MANUAL, BidEntry, Bidder
from proxy_auction.common.money import to_money

logger = logging.getLogger(__name__)


def validate_bidder(bidder: Bidder):
    """Raise the matching InvalidBidder subclass if a bidder's parameters are out of range."""
    if bidder.starting_bid <= 0:
        raise InvalidStartingBid(bidder.id, bidder.starting_bid)
    if bidder.max_bid < bidder.starting_bid:
        raise InvalidMaxBid(bidder.id, bidder.max_bid, bidder.starting_bid)
    if bidder.auto_increment <= 0:
        raise InvalidIncrement(bidder.id, bidder.auto_increment)
    if not bidder.starting_bid <= bidder.current_bid <= bidder.max_bid:
        raise InvalidCurrentBid(bidder.id, bidder.current_bid, bidder.starting_bid, bidder.max_bid)


def validate_bidders(bidders):
    """
    Check the bidder list for a new auction.
    Ids are checked for duplicates across the whole list before any
    individual bidder's parameters are looked at.
    """
    if len(bidders) < 2:
        raise InsufficientBidders(len(bidders))
    seen = set()
    for bidder in bidders:
        if bidder.id in seen:
            raise DuplicateBidder(bidder.id)
        seen.add(bidder.id)
    for bidder in bidders:
        validate_bidder(bidder)


class Auction:
    def __init__(self, bidders, clock=None):
        """
        Validate bidders and open a new auction over them.
        bidders: list of Bidder records; held by reference, not copied.
        clock: zero-argument callable returning comparable timestamps.
        """
        validate_bidders(bidders)
        self.id = uuid.uuid4()
        self.bidders = bidders
        self.history = []
        self._clock = clock or default_clock
        self._index = {b.id: b for b in bidders}
        self._lock = threading.Lock()
        logger.info(f"Auction {self.id} opened with {len(bidders)} bidders")

    def place_bid(self, bidder, amount):
        """
        Place a manual bid and run the auto-increment sweep over every other bidder.
        bidder: a Bidder of this auction, or its id.
        Raises a BidRejected subclass and leaves state untouched if validation fails.
        """
        amount = to_money(amount)
        bidder_id = _bidder_id(bidder)
        with self._lock:
            target = self._index.get(bidder_id)
            if target is None:
                raise UnknownBidder(bidder_id, amount)
            try:
                self._check_bid(target, amount)
            except BidRejected as e:
                logger.debug(f"Auction {self.id}: rejected bid from {target.name} ({target.id}): {e}")
                raise

            self._apply(target, amount, MANUAL)
            logger.debug(f"Auction {self.id}: {target.name} bid {amount}")

            for other in self.bidders:
                if other.id == target.id:
                    continue
                candidate = other.current_bid + other.auto_increment
                if candidate <= other.max_bid:
                    self._apply(other, candidate, AUTO)
                    logger.debug(f"Auction {self.id}: {other.name} auto-raised to {candidate}")

    def determine_winner(self, consistent=True):
        """
        Return the highest bidder, earliest last_bid_time on ties.
        With consistent=False the scan runs without taking the auction lock
        and may observe a sweep in progress.
        """
        if not consistent:
            return select_winner(self.bidders)
        with self._lock:
            return select_winner(self.bidders)

    def to_dict(self):
        with self._lock:
            winner = select_winner(self.bidders)
            return {
                "id": str(self.id),
                "bidders": [b.to_dict() for b in self.bidders],
                "history": [e.to_dict() for e in self.history],
                "winner": str(winner.id) if winner else None,
            }

    def _check_bid(self, bidder, amount):
        if amount < bidder.starting_bid:
            raise BidBelowStartingBid(bidder.id, amount, bidder.starting_bid)
        if amount > bidder.max_bid:
            raise BidAboveMaxBid(bidder.id, amount, bidder.max_bid)
        if amount <= bidder.current_bid:
            raise BidNotHigherThanCurrent(bidder.id, amount, bidder.current_bid)

    def _apply(self, bidder, amount, kind):
        # Caller holds self._lock; one clock read per bidder update
        now = self._clock()
        bidder.current_bid = amount
        bidder.last_bid_time = now
        self.history.append(BidEntry(bidder_id=bidder.id, amount=amount, kind=kind, timestamp=now))


def _bidder_id(bidder):
    if isinstance(bidder, Bidder):
        return bidder.id
    if isinstance(bidder, uuid.UUID):
        return bidder
    try:
        return uuid.UUID(str(bidder))
    except ValueError:
        return bidder


def create_auction(bidders, clock=None) -> Auction:
    return Auction(bidders, clock=clock)


def place_bid(auction: Auction, bidder, amount):
    auction.place_bid(bidder, amount)


def determine_winner(auction: Auction):
    return auction.determine_winner()
