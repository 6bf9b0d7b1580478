"""
Shared pytest fixtures for the auction tests.
"""

import itertools

import pytest

from proxy_auction.common.entries import Bidder


@pytest.fixture
def clock():
    """Logical clock yielding 1, 2, 3, ... so bid ordering is reproducible."""
    return itertools.count(1).__next__


@pytest.fixture
def bidders():
    """The reference field: Sasha 50-80 +3, John 60-82 +2, Pat 55-85 +5."""
    return [
        Bidder(name="Sasha", starting_bid=50, max_bid=80, auto_increment=3),
        Bidder(name="John", starting_bid=60, max_bid=82, auto_increment=2),
        Bidder(name="Pat", starting_bid=55, max_bid=85, auto_increment=5),
    ]
