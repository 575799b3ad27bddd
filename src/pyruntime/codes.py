"""Error code constants for py_runtime resolution.

These constants prevent stringly-typed error codes and ensure
client code matches on the correct resolution failure kinds.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Resolution error codes."""

    # Attribute errors (blocking)
    ATTRIBUTE_CONFLICT = "ATTRIBUTE_CONFLICT"
    ATTRIBUTE_INVALID = "ATTRIBUTE_INVALID"
    COVERAGE_TOOL_UNRESOLVABLE = "COVERAGE_TOOL_UNRESOLVABLE"
    VERSION_REQUIRED_IN_TOOLCHAIN_MODE = "VERSION_REQUIRED_IN_TOOLCHAIN_MODE"

    # Input loading errors (API layer only, never emitted by the kernel)
    INVALID_STRUCTURE = "INVALID_STRUCTURE"
