"""
csemver command line interface.

This package provides the CLI commands for compact-semver.
"""

from compact_semver.cli.main import app

__all__ = ["app"]
