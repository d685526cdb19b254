# utils/scripts/lookup_count.py
"""
One-shot restaurant count lookup against the configured backend.

Usage:
  python -m utils.scripts.lookup_count ihop
  python -m utils.scripts.lookup_count ihop --env-file prod.env --debug

Exit codes: 0 ok, 1 restaurant not found, 2 any other lookup error.
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from backend.errors import CountLookupError, RestaurantNotFound


def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("restaurant", help="Exact restaurant name, e.g. ihop")
    p.add_argument("--env-file", default=None, help="Extra .env file to load before reading settings")
    p.add_argument("--debug", action="store_true", help="Debug/verbose")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    if args.env_file:
        load_dotenv(args.env_file, override=True)

    from app.settings import Settings
    from backend.store_factory import get_lookup

    try:
        lookup = get_lookup(Settings())
        if args.debug:
            print("backend:", lookup.backend, file=sys.stderr)
        print(lookup.lookup_count(args.restaurant))
        return 0
    except RestaurantNotFound as e:
        print(e, file=sys.stderr)
        return 1
    except CountLookupError as e:
        print("lookup failed:", e, file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
