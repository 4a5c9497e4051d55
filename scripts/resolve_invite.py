#!/usr/bin/env python3
"""
Resolve a Discord invite code and print the raw invite JSON.
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import invite_info modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from invite_info.config import settings
from invite_info.errors import InviteLookupError
from invite_info.highlight import format_payload, highlight_ansi
from invite_info.lookup import InviteClient
from invite_info.utils import normalize_invite_code


async def resolve_invite(invite_code: str) -> int:
    """Look up an invite and print its JSON, coloured when stdout is a terminal."""
    client = InviteClient(settings)

    try:
        lookup = await client.fetch_invite(invite_code)
    except InviteLookupError as e:
        print(f"ERROR: {e.message}")
        return 1
    finally:
        await client.close()

    text = format_payload(lookup.payload)
    print(highlight_ansi(text) if sys.stdout.isatty() else text)
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/resolve_invite.py <invite_code>")
        print("Example: python scripts/resolve_invite.py 77jcCNfT")
        sys.exit(1)

    # Accepts https://discord.gg/... links as well as bare codes
    invite_code = normalize_invite_code(sys.argv[1])
    if not invite_code:
        print("ERROR: No invite code given")
        sys.exit(1)

    sys.exit(asyncio.run(resolve_invite(invite_code)))
