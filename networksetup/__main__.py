#!/usr/bin/env python3
"""
Entry point for running networksetup as a module.
"""

if __name__ == "__main__":
    from .cli import cli

    cli()
