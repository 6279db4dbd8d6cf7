"""
Default configuration values for compact-semver.

This module provides default configuration values used when no configuration
file is specified or when values are missing from the configuration.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    # Logging defaults
    "logging": {
        "level": "INFO",
        "format": "console",
        "output": "stderr",
    },
    # Codec defaults
    "codec": {
        "width": 32,
        "signed": True,
        "strict_overflow": False,
    },
    # Output defaults
    "output": {
        "format": "table",
    },
}


def get_default_config_yaml() -> str:
    """
    Generate default configuration as YAML string.

    Returns:
        YAML-formatted default configuration with documentation comments.
    """
    return '''# =============================================================================
# compact-semver configuration
# =============================================================================
# Values can be overridden with environment variables prefixed CSEMVER_,
# e.g. CSEMVER_CODEC__WIDTH=64

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
logging:
  # DEBUG, INFO, WARNING, ERROR, CRITICAL
  level: INFO
  # console (development) or json (CI)
  format: console
  # stdout, stderr, or a file path
  output: stderr

# -----------------------------------------------------------------------------
# Codec
# -----------------------------------------------------------------------------
codec:
  # Packed integer width: 32 (components 0-1023) or 64 (components 0-65535)
  width: 32
  # Emit signed integers; false emits unsigned integers with the same bytes
  signed: true
  # Reject components equal to 2**field_width instead of storing them as zero
  strict_overflow: false

# -----------------------------------------------------------------------------
# Output
# -----------------------------------------------------------------------------
output:
  # table, json, or yaml
  format: table
'''
