import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional

from proxy_auction.common.clock import default_clock
from proxy_auction.common.money import to_money

MANUAL = "manual"
AUTO = "auto"


@dataclass(eq=False)
class Bidder:
    name: str = ""
    starting_bid: Decimal = Decimal("0")
    max_bid: Decimal = Decimal("0")
    auto_increment: Decimal = Decimal("0")
    current_bid: Optional[Decimal] = None
    last_bid_time: Optional[int] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        self.starting_bid = to_money(self.starting_bid)
        self.max_bid = to_money(self.max_bid)
        self.auto_increment = to_money(self.auto_increment)
        # A bidder with no bid on record sits at its starting bid
        if self.current_bid is None:
            self.current_bid = self.starting_bid
        else:
            self.current_bid = to_money(self.current_bid)
        if self.last_bid_time is None:
            self.last_bid_time = default_clock()
        if not isinstance(self.id, uuid.UUID):
            self.id = uuid.UUID(str(self.id))

    def __eq__(self, other):
        if not isinstance(other, Bidder):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def to_dict(self) -> Dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "starting_bid": str(self.starting_bid),
            "max_bid": str(self.max_bid),
            "auto_increment": str(self.auto_increment),
            "current_bid": str(self.current_bid),
            "last_bid_time": self.last_bid_time,
        }

    @staticmethod
    def from_dict(d: Dict) -> 'Bidder':
        kwargs = dict(
            name=d.get("name", ""),
            starting_bid=d["starting_bid"],
            max_bid=d["max_bid"],
            auto_increment=d["auto_increment"],
            current_bid=d.get("current_bid"),
            last_bid_time=d.get("last_bid_time"),
        )
        if d.get("id"):
            kwargs["id"] = uuid.UUID(str(d["id"]))
        return Bidder(**kwargs)


@dataclass(frozen=True)
class BidEntry:
    bidder_id: uuid.UUID
    amount: Decimal
    kind: str = MANUAL
    timestamp: int = 0

    def to_dict(self) -> Dict:
        return {
            "bidder_id": str(self.bidder_id),
            "amount": str(self.amount),
            "kind": self.kind,
            "timestamp": self.timestamp,
        }

    @staticmethod
    def from_dict(d: Dict) -> 'BidEntry':
        return BidEntry(
            bidder_id=uuid.UUID(str(d["bidder_id"])),
            amount=to_money(d["amount"]),
            kind=d.get("kind", MANUAL),
            timestamp=d.get("timestamp", 0),
        )
