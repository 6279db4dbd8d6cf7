"""
compact-semver configuration management.

This package provides configuration loading, validation, and management
for the compact-semver CLI.
"""

from compact_semver.config.manager import ConfigManager
from compact_semver.config.models import CodecConfig, SemverConfig

__all__ = ["ConfigManager", "CodecConfig", "SemverConfig"]
