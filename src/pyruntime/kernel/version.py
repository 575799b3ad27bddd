"""Python major version values and the version-defaulting policy."""

from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

from ..codes import ErrorCode
from .issues import InvariantViolation, RuntimeIssue, attribute_error

if TYPE_CHECKING:
    from .inputs import BuildConfiguration


class PythonVersion(str, Enum):
    """Major Python version of a runtime.

    PY2 and PY3 are target values. UNSPECIFIED is the sentinel an attribute
    holds when the user did not set it; it never appears in a descriptor.
    """

    PY2 = "PY2"
    PY3 = "PY3"
    UNSPECIFIED = "_INTERNAL_SENTINEL"

    def is_target_value(self) -> bool:
        return self is not PythonVersion.UNSPECIFIED

    @classmethod
    def target_values(cls) -> Tuple["PythonVersion", ...]:
        return (cls.PY2, cls.PY3)

    @classmethod
    def parse_target_or_sentinel(cls, text: str) -> "PythonVersion":
        """Parse an attribute string; accepts the target values and the sentinel."""
        for member in cls:
            if member.value == text:
                return member
        allowed = ", ".join(repr(m.value) for m in cls)
        raise ValueError(f"Invalid python version '{text}', expected one of {allowed}")

    @classmethod
    def parse_target(cls, text: str) -> "PythonVersion":
        """Parse a configuration string; only target values are allowed."""
        version = cls.parse_target_or_sentinel(text)
        if not version.is_target_value():
            raise ValueError(f"'{text}' is not a target python version (use 'PY2' or 'PY3')")
        return version


TOOLCHAIN_VERSION_MESSAGE = (
    "When using Python toolchains, this attribute must be set explicitly to either 'PY2' "
    "or 'PY3'. You can temporarily avoid this error by reverting to the legacy Python "
    "runtime mechanism (use_toolchains=false)."
)


def resolve_python_version(
    specifier: PythonVersion,
    configuration: "BuildConfiguration",
) -> Tuple[Optional[PythonVersion], List[RuntimeIssue]]:
    """Resolve the python_version attribute against the build configuration.

    Returns:
        (version, issues). version is None exactly when issues is non-empty.
    """
    if specifier.is_target_value():
        return specifier, []

    if configuration.use_toolchains:
        return None, [attribute_error(
            ErrorCode.VERSION_REQUIRED_IN_TOOLCHAIN_MODE,
            "python_version",
            TOOLCHAIN_VERSION_MESSAGE,
        )]

    # Legacy mode: same default py_binary/py_test would get, no transition involved.
    return configuration.default_python_version, []


def check_target_value(version: Optional[PythonVersion]) -> PythonVersion:
    """Assert that a resolved version is concrete.

    Raises:
        InvariantViolation: if the version is missing or the sentinel.
    """
    if version is None or not version.is_target_value():
        raise InvariantViolation(f"Resolved python version must be a target value, got {version!r}")
    return version
