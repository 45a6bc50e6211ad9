import argparse
import asyncio
import logging

from flip7.models import RulesConfig
from flip7.store import GameStore

from .server import ScorekeeperServer


def main() -> None:
    parser = argparse.ArgumentParser(description="Flip 7 scorekeeper host")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--win-threshold", type=int, default=200, help="Total score that ends the game")
    parser.add_argument("--min-players", type=int, default=2)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level))

    rules = RulesConfig(win_threshold=args.win_threshold, min_players=args.min_players)
    server = ScorekeeperServer(GameStore(rules))
    asyncio.run(server.start(host=args.host, port=args.port))


if __name__ == "__main__":
    main()
