#!/usr/bin/env python3
"""
Development Token Script

Prints a bearer token signed with the configured SECRET_KEY.

In a real deployment tokens come from the authentication service; this
script stands in for it on a developer machine.

Usage:
    python scripts/create_dev_token.py alice
    python scripts/create_dev_token.py alice --minutes 120

    curl -H "Authorization: Bearer $(python scripts/create_dev_token.py alice)" \\
        http://localhost:5000/api/v1/books
"""

import argparse
import sys
from datetime import timedelta
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.services.security import create_access_token


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Create a bearer token for local development"
    )
    parser.add_argument(
        "subject",
        help="Value of the token's 'sub' claim (user id or name)"
    )
    parser.add_argument(
        "--minutes",
        type=int,
        default=60,
        help="Token lifetime in minutes (default: 60)"
    )

    args = parser.parse_args()

    token = create_access_token(
        {"sub": args.subject},
        expires_delta=timedelta(minutes=args.minutes),
    )
    print(token)


if __name__ == "__main__":
    main()
