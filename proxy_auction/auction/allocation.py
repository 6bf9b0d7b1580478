"""
allocation.py: Winner-determination logic for proxy-bid auctions
"""
from typing import Iterable, Optional

from proxy_auction.common.entries import Bidder


def is_winner(current: Optional[Bidder], candidate: Bidder) -> bool:
    """
    Return True if candidate should replace the current best bidder:
    there is no current best, the candidate bids more, or the bids are
    equal and the candidate reached that amount strictly earlier.
    """
    if current is None:
        return True
    if candidate.current_bid > current.current_bid:
        return True
    return (candidate.current_bid == current.current_bid
            and candidate.last_bid_time < current.last_bid_time)


def select_winner(bidders: Iterable[Bidder]) -> Optional[Bidder]:
    """
    Scan bidders in order and return the highest bidder, earliest on ties.
    Returns None only for an empty sequence.
    """
    winner = None
    for bidder in bidders:
        if is_winner(winner, bidder):
            winner = bidder
    return winner
