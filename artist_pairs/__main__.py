#!/usr/bin/env python3
"""
Enable execution of the artist_pairs package as a module.

This allows running the package with: python -m artist_pairs
"""

from .cli.main import main

if __name__ == "__main__":
    main()
