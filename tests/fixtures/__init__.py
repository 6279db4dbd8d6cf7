"""Test fixtures for compact-semver tests."""

from tests.fixtures.vectors import (
    DECODE_ERROR_VECTORS,
    ENCODE_VECTORS_32,
    ENCODE_VECTORS_64,
    make_buffer_with_tag,
)

__all__ = [
    "ENCODE_VECTORS_32",
    "ENCODE_VECTORS_64",
    "DECODE_ERROR_VECTORS",
    "make_buffer_with_tag",
]
