import argparse
import json
import logging
import sys

from proxy_auction.auction.errors import AuctionError
from proxy_auction.auction.simulation import run_proxy_rounds
from proxy_auction.auction.state_machine import Auction
from proxy_auction.common.money import format_money
from proxy_auction.storage.bidder_file import BidderFileError, read_bidders


def main(argv=None):
    parser = argparse.ArgumentParser(description='Proxy Auction: settle a proxy-bidding auction')
    parser.add_argument('bidders', help='Bidder definitions (.json list or .jsonl, one bidder per line)')
    parser.add_argument('--max-rounds', type=int, default=10000,
                        help='Upper bound on proxy bidding rounds (default: 10000)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: INFO)')
    parser.add_argument('--json', action='store_true',
                        help='Print the final auction state as JSON')
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(levelname)s %(message)s')

    try:
        bidders = read_bidders(args.bidders)
        auction = Auction(bidders)
        rounds = run_proxy_rounds(auction, max_rounds=args.max_rounds)
    except (AuctionError, BidderFileError) as e:
        logging.error(f"Auction failed: {e}")
        return 1

    if args.json:
        print(json.dumps(auction.to_dict(), indent=2))
        return 0

    winner = auction.determine_winner()
    for bidder in auction.bidders:
        print(f"{bidder.name}: {format_money(bidder.current_bid)} (max {format_money(bidder.max_bid)})")
    print(f"Winner after {rounds} rounds: {winner.name} at {format_money(winner.current_bid)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
