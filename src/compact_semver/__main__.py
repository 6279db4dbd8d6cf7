"""
Entry point for running compact-semver as a module.

Usage:
    python -m compact_semver [COMMAND] [OPTIONS]
"""

from compact_semver.cli.main import app

if __name__ == "__main__":
    app()
