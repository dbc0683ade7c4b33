#!/usr/bin/env python3
"""
ABOUTME: Entry point for the strict-env checker
ABOUTME: Simple wrapper that imports and runs the CLI
"""

from strict_env.cli import main

if __name__ == "__main__":
    main()
