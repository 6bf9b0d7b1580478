"""
Tests for loading bidder definitions from JSON and JSONL files.
"""

import json
import uuid
from decimal import Decimal

import pytest

from proxy_auction.storage.bidder_file import BidderFileError, read_bidders

BIDDERS = [
    {"name": "Sasha", "starting_bid": 50, "max_bid": 80, "auto_increment": 3},
    {"name": "John", "starting_bid": "60.00", "max_bid": "82.00", "auto_increment": "2.00"},
]


def test_read_json_list(tmp_path):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps(BIDDERS))
    bidders = read_bidders(str(path))
    assert [b.name for b in bidders] == ["Sasha", "John"]
    assert bidders[1].max_bid == Decimal("82.00")
    assert bidders[0].current_bid == Decimal("50")


def test_read_json_object(tmp_path):
    path = tmp_path / "auction.json"
    path.write_text(json.dumps({"bidders": BIDDERS}))
    assert len(read_bidders(str(path))) == 2


def test_read_jsonl_skips_blank_lines(tmp_path):
    path = tmp_path / "bidders.jsonl"
    path.write_text(json.dumps(BIDDERS[0]) + "\n\n" + json.dumps(BIDDERS[1]) + "\n")
    bidders = read_bidders(str(path))
    assert [b.name for b in bidders] == ["Sasha", "John"]


def test_explicit_id_kept(tmp_path):
    bidder_id = uuid.uuid4()
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps([dict(BIDDERS[0], id=str(bidder_id))]))
    assert read_bidders(str(path))[0].id == bidder_id


def test_missing_keys(tmp_path):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps([{"name": "x", "starting_bid": 1}]))
    with pytest.raises(BidderFileError, match="entry 0.*missing keys: max_bid, auto_increment"):
        read_bidders(str(path))


def test_bad_jsonl_line(tmp_path):
    path = tmp_path / "bidders.jsonl"
    path.write_text(json.dumps(BIDDERS[0]) + "\n{not json\n")
    with pytest.raises(BidderFileError, match="line 2"):
        read_bidders(str(path))


def test_bad_amount(tmp_path):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps([dict(BIDDERS[0], max_bid="lots")]))
    with pytest.raises(BidderFileError):
        read_bidders(str(path))


def test_not_a_list(tmp_path):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps({"name": "x"}))
    with pytest.raises(BidderFileError, match="expected a list"):
        read_bidders(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(BidderFileError, match="no such file"):
        read_bidders(str(tmp_path / "nope.json"))


@pytest.mark.parametrize("name", ["bidders.json", "bidders.jsonl"])
def test_invalid_utf8(tmp_path, name):
    path = tmp_path / name
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(BidderFileError, match=r"\(file\)"):
        read_bidders(str(path))


def test_directory_path(tmp_path):
    with pytest.raises(BidderFileError, match=r"\(file\)"):
        read_bidders(str(tmp_path))


def test_current_bid_read_from_file(tmp_path):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps([dict(BIDDERS[0], current_bid="62.00")]))
    assert read_bidders(str(path))[0].current_bid == Decimal("62.00")
