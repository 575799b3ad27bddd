"""Interpreter attribute validation.

Decides whether a py_runtime target is hermetic (in-build interpreter) or
points at a platform interpreter, and reports every attribute conflict found.
All checks run; none short-circuits the others.
"""

import posixpath
from typing import List, Optional, Tuple

from ..codes import ErrorCode
from .artifacts import Artifact
from .depset import DepSet
from .issues import RuntimeIssue, attribute_error, rule_error


def normalize_interpreter_path(path: str) -> str:
    """Collapse '.', '..' and repeated separators.

    A path that collapses to the current directory ('.', './', 'a/..') is
    the empty path, the same as an unset interpreter_path.
    """
    if not path:
        return ""
    normalized = posixpath.normpath(path)
    if normalized == ".":
        return ""
    # normpath keeps a leading '//' as-is; a single root is enough here.
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return normalized


def is_absolute_path(path: str) -> bool:
    return path.startswith("/")


def validate_interpreter_attributes(
    interpreter: Optional[Artifact],
    interpreter_path: str,
    files: DepSet,
) -> Tuple[bool, List[RuntimeIssue]]:
    """Validate the interpreter, interpreter_path and files attributes.

    Args:
        interpreter: In-build interpreter artifact, or None
        interpreter_path: Platform interpreter path, "" when unset
        files: Support files of the runtime

    Returns:
        (hermetic, issues). hermetic is True iff an interpreter artifact is set.
    """
    issues: List[RuntimeIssue] = []
    path = normalize_interpreter_path(interpreter_path)

    if (interpreter is None) == (path == ""):
        issues.append(rule_error(
            ErrorCode.ATTRIBUTE_CONFLICT,
            "exactly one of the 'interpreter' or 'interpreter_path' attributes must be specified",
        ))

    hermetic = interpreter is not None

    if not hermetic and not files.is_empty():
        issues.append(rule_error(
            ErrorCode.ATTRIBUTE_CONFLICT,
            "if 'interpreter_path' is given then 'files' must be empty",
        ))

    if not hermetic and not is_absolute_path(path):
        issues.append(attribute_error(
            ErrorCode.ATTRIBUTE_INVALID,
            "interpreter_path",
            "must be an absolute path.",
        ))

    return hermetic, issues
