import json
import os
from typing import List

from proxy_auction.common.entries import Bidder

REQUIRED_KEYS = ("starting_bid", "max_bid", "auto_increment")


class BidderFileError(ValueError):
    def __init__(self, path, location, reason):
        self.path = path
        self.location = location
        super().__init__(f"{path} ({location}): {reason}")


def _to_bidder(path, location, record) -> Bidder:
    if not isinstance(record, dict):
        raise BidderFileError(path, location, "bidder entry must be an object")
    missing = [k for k in REQUIRED_KEYS if k not in record]
    if missing:
        raise BidderFileError(path, location, f"missing keys: {', '.join(missing)}")
    try:
        return Bidder.from_dict(record)
    except (TypeError, ValueError) as e:
        raise BidderFileError(path, location, str(e)) from e


def _read_text(path: str) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise BidderFileError(path, "file", str(e)) from e


def read_bidders(path: str) -> List[Bidder]:
    """
    Load bidder definitions from disk.
    .jsonl files hold one bidder object per line (blank lines skipped);
    anything else is parsed as JSON holding a list of bidder objects or
    an object with a "bidders" list.
    Unreadable files, bad UTF-8 and malformed entries raise BidderFileError.
    """
    if not os.path.exists(path):
        raise BidderFileError(path, "file", "no such file")
    text = _read_text(path)
    bidders = []
    if path.endswith('.jsonl'):
        for lineno, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise BidderFileError(path, f"line {lineno}", e.msg) from e
            bidders.append(_to_bidder(path, f"line {lineno}", record))
        return bidders

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BidderFileError(path, f"line {e.lineno}", e.msg) from e
    if isinstance(data, dict):
        data = data.get("bidders")
    if not isinstance(data, list):
        raise BidderFileError(path, "file", "expected a list of bidders")
    for i, record in enumerate(data):
        bidders.append(_to_bidder(path, f"entry {i}", record))
    return bidders
