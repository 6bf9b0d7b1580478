"""
Tests for the proxy-auction command line entry point.
"""

import json

from proxy_auction.main import main


def write_bidders(tmp_path, bidders):
    path = tmp_path / "bidders.json"
    path.write_text(json.dumps(bidders))
    return str(path)


REFERENCE = [
    {"name": "Sasha", "starting_bid": 50, "max_bid": 80, "auto_increment": 3},
    {"name": "John", "starting_bid": 60, "max_bid": 82, "auto_increment": 2},
    {"name": "Pat", "starting_bid": 55, "max_bid": 85, "auto_increment": 5},
]


def test_prints_winner(tmp_path, capsys):
    assert main([write_bidders(tmp_path, REFERENCE)]) == 0
    out = capsys.readouterr().out
    assert "Pat: $85.00 (max $85.00)" in out
    assert "Winner after" in out
    assert out.strip().endswith("Pat at $85.00")


def test_json_output(tmp_path, capsys):
    assert main([write_bidders(tmp_path, REFERENCE), "--json"]) == 0
    snap = json.loads(capsys.readouterr().out)
    by_id = {b["id"]: b["name"] for b in snap["bidders"]}
    assert by_id[snap["winner"]] == "Pat"
    assert snap["history"]


def test_invalid_auction_exit_code(tmp_path, capsys):
    assert main([write_bidders(tmp_path, REFERENCE[:1])]) == 1
    assert capsys.readouterr().out == ""


def test_round_limit_exit_code(tmp_path):
    assert main([write_bidders(tmp_path, REFERENCE), "--max-rounds", "1"]) == 1


def test_missing_file_exit_code(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_directory_exit_code(tmp_path):
    assert main([str(tmp_path)]) == 1


def test_invalid_utf8_exit_code(tmp_path):
    path = tmp_path / "bidders.jsonl"
    path.write_bytes(b"\xff\xfe")
    assert main([str(path)]) == 1


def test_current_bid_above_max_exit_code(tmp_path, capsys):
    bidders = [dict(REFERENCE[0], current_bid=1000)] + REFERENCE[1:]
    assert main([write_bidders(tmp_path, bidders)]) == 1
    assert capsys.readouterr().out == ""
