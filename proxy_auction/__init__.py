"""
proxy_auction: single-item auction engine with proxy (automatic) bidding
"""
from proxy_auction.auction.allocation import is_winner, select_winner
from proxy_auction.auction.errors import (
    AuctionError,
    BidAboveMaxBid,
    BidBelowStartingBid,
    BidNotHigherThanCurrent,
    BidRejected,
    DuplicateBidder,
    InsufficientBidders,
    InvalidAuction,
    InvalidBidder,
    InvalidCurrentBid,
    InvalidIncrement,
    InvalidMaxBid,
    InvalidStartingBid,
    RoundLimitExceeded,
    UnknownBidder,
)
from proxy_auction.auction.simulation import run_proxy_rounds
from proxy_auction.auction.state_machine import Auction, create_auction, determine_winner, place_bid
from proxy_auction.common.entries import BidEntry, Bidder

__all__ = [
    "Auction",
    "Bidder",
    "BidEntry",
    "create_auction",
    "place_bid",
    "determine_winner",
    "run_proxy_rounds",
    "is_winner",
    "select_winner",
    "AuctionError",
    "InvalidAuction",
    "InsufficientBidders",
    "DuplicateBidder",
    "InvalidBidder",
    "InvalidStartingBid",
    "InvalidMaxBid",
    "InvalidIncrement",
    "InvalidCurrentBid",
    "BidRejected",
    "UnknownBidder",
    "BidBelowStartingBid",
    "BidAboveMaxBid",
    "BidNotHigherThanCurrent",
    "RoundLimitExceeded",
]
