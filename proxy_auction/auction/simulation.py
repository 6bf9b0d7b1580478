"""
simulation.py: Drive an auction until no bidder can afford another increment
"""
import logging
from typing import Optional

from proxy_auction.auction.errors import BidNotHigherThanCurrent, RoundLimitExceeded
from proxy_auction.auction.state_machine import Auction

logger = logging.getLogger(__name__)


def run_proxy_rounds(auction: Auction, max_rounds: Optional[int] = None) -> int:
    """
    Repeatedly let each bidder, in auction order, bid its current bid plus its
    auto-increment while that stays within its max bid. Stops once no bidder
    can afford another step, or after a round in which no bid is accepted.
    Returns the number of rounds that placed at least one bid.
    Raises RoundLimitExceeded, before placing anything further, if another
    round is still needed once max_rounds rounds have run.
    """
    rounds = 0
    while True:
        if not any(b.current_bid + b.auto_increment <= b.max_bid for b in auction.bidders):
            break
        if max_rounds is not None and rounds >= max_rounds:
            raise RoundLimitExceeded(max_rounds)
        placed = 0
        for bidder in auction.bidders:
            next_bid = bidder.current_bid + bidder.auto_increment
            if next_bid > bidder.max_bid:
                continue
            try:
                auction.place_bid(bidder, next_bid)
            except BidNotHigherThanCurrent:
                # Another caller's sweep moved this bidder past next_bid
                logger.debug(f"Auction {auction.id}: {bidder.name} already at or above {next_bid}")
                continue
            placed += 1
        if not placed:
            break
        rounds += 1
    logger.info(f"Auction {auction.id} settled after {rounds} rounds")
    return rounds
