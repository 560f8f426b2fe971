#!/usr/bin/env python3
"""
Artist Pair Finder - Entry Point Wrapper

Simple wrapper script so the tool can be run from a checkout without
installing the package.
"""

import sys

from artist_pairs.cli import main as cli_main, create_argument_parser
from artist_pairs.constants import EXIT_INTERRUPTED


def main():
    """Main entry point that delegates to the package CLI."""
    try:
        cli_main()
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


__all__ = ['main', 'create_argument_parser']

if __name__ == "__main__":
    main()
