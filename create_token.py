#!/usr/bin/env python3
"""
Mint a development bearer token signed with the configured JWT_SECRET.

Usage:
    python create_token.py USER_ID [--role admin] [--minutes 60]
"""

import argparse
from datetime import timedelta

from storefront import create_app
from storefront.extensions import get_token_verifier


def main():
    parser = argparse.ArgumentParser(description='Create a bearer token for local testing.')
    parser.add_argument('user_id', help='subject identity to put in the token')
    parser.add_argument('--role', default='customer', choices=['customer', 'admin'])
    parser.add_argument('--minutes', type=int, default=None,
                        help='lifetime in minutes (defaults to JWT_EXPIRES_MINUTES)')
    args = parser.parse_args()

    app = create_app()
    with app.app_context():
        expires_in = timedelta(minutes=args.minutes) if args.minutes else None
        token = get_token_verifier().issue(args.user_id, role=args.role, expires_in=expires_in)

    print(f"Token for {args.user_id} ({args.role}):")
    print(token)
    print()
    print(f"curl -H 'Authorization: Bearer {token}' http://127.0.0.1:5000/cart")


if __name__ == '__main__':
    main()
