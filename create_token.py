#!/usr/bin/env python3
"""
Issue a bearer token for a user id.

The API trusts the ``user_id`` claim of a token signed with ``SECRET_KEY``.
Use this script to obtain a token for manual testing.

Usage:
    python create_token.py --user-id 1 --days 365
"""

import argparse
from typing import List, Optional

from meetup_api.app.core.security import create_access_token


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Create a Meetup API access token.")
    ap.add_argument("--user-id", type=int, required=True, help="Owner id to embed in the token")
    ap.add_argument("--days", type=positive_int, default=365, help="Token lifetime in days (>= 1)")
    args = ap.parse_args(argv)

    token = create_access_token({"user_id": args.user_id}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
