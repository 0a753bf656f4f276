#!/usr/bin/env python3
"""
Basic usage examples for the Letterboxd client library.

This script assumes that the following environment variables are set:
  LETTERBOXD_API_KEY       letterboxd api key
  LETTERBOXD_API_SECRET    letterboxd api secret
  LETTERBOXD_USERNAME      letterboxd username (optional)
  LETTERBOXD_PASSWORD      letterboxd password (optional)
"""

import logging
import os
import sys

import letterboxd

FIGHT_CLUB = "2a9q"


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)

    print("=== Letterboxd Python Client Basic Usage Examples ===\n")

    try:
        api_key_pair = letterboxd.ApiKeyPair.from_env()
    except letterboxd.ConfigurationError as e:
        print(f"   ✗ {e}")
        return 1

    # Example 1: public endpoints, no member needed
    print("1. Searching for 'Fight Club'...")
    with letterboxd.Client(api_key_pair) as client:
        try:
            resp = client.search(letterboxd.SearchRequest(input="Fight Club", per_page=1))
            for item in resp.items:
                if isinstance(item, letterboxd.FilmSearchItem):
                    print(f"   ✓ Found film: {item.film.name} ({item.film.release_year})")
            print(f"   Next page cursor: {resp.next}")

            film = client.film(FIGHT_CLUB)
            print(f"   ✓ Film details: {film.name}, {film.run_time} minutes")
        except letterboxd.ServerError as e:
            print(f"   ✗ Server rejected the request: {e.status_code} {e.response}")
        except letterboxd.LetterboxdError as e:
            print(f"   ✗ Request failed: {e}")
    print()

    # Example 2: member endpoints, password grant
    username = os.environ.get("LETTERBOXD_USERNAME")
    password = os.environ.get("LETTERBOXD_PASSWORD")
    if not username or not password:
        print("2. Skipping authenticated examples (no username/password set)")
        return 0

    print("2. Authenticating...")
    try:
        client = letterboxd.Client.authenticate(api_key_pair, username, password)
    except letterboxd.LetterboxdError as e:
        print(f"   ✗ Authentication failed: {e}")
        return 1
    print(f"   ✓ Token expires in {client.token.expires_in}s\n")

    with client:
        print("3. Marking 'Fight Club' as watched...")
        try:
            req = letterboxd.FilmRelationshipUpdateRequest(watched=True)
            resp = client.update_film_relationship(FIGHT_CLUB, req)
            print(f"   ✓ Watched: {resp.data.watched}, liked: {resp.data.liked}")
            for message in resp.messages:
                print(f"   {message.type}: {message.code} {message.title}")
        except letterboxd.ServerError as e:
            print(f"   ✗ Update failed: {e.status_code} {e.messages()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
