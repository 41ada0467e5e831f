#!/usr/bin/env python3
"""Compatibility wrapper that delegates to the bridgefee CLI."""

from bridgefee.cli.main import main


if __name__ == "__main__":
    main()
