"""Test public API surface - ensure imports work correctly and no side effects."""

import pytest


def test_root_exports():
    import pyruntime

    for name in pyruntime.__all__:
        assert hasattr(pyruntime, name), f"pyruntime.{name} missing"


def test_version_string():
    import pyruntime

    assert pyruntime.__version__ in ("1.0.0", "dev")


def test_api_exports_core_functions():
    from pyruntime.api import configure_runtime_target, resolve_runtime
    from pyruntime.kernel.resolve import resolve

    assert callable(resolve)
    assert callable(resolve_runtime)
    assert callable(configure_runtime_target)


def test_error_codes_are_stable():
    from pyruntime import ErrorCode

    assert {code.value for code in ErrorCode} == {
        "ATTRIBUTE_CONFLICT",
        "ATTRIBUTE_INVALID",
        "COVERAGE_TOOL_UNRESOLVABLE",
        "VERSION_REQUIRED_IN_TOOLCHAIN_MODE",
        "INVALID_STRUCTURE",
    }


def test_invariant_violation_is_not_a_user_error():
    from pyruntime import InvariantViolation, RuntimeIssue

    assert issubclass(InvariantViolation, AssertionError)
    assert not issubclass(InvariantViolation, ValueError)
    assert not issubclass(RuntimeIssue, Exception)


def test_issue_is_frozen():
    from pyruntime import ErrorCode, RuntimeIssue

    issue = RuntimeIssue(code=ErrorCode.ATTRIBUTE_INVALID, attribute="interpreter_path", message="m")
    with pytest.raises(Exception):
        issue.message = "changed"
