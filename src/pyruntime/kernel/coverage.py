"""Coverage tool resolution.

The coverage_tool attribute names either a target producing a single file
(that file is the tool) or an executable target (its executable is the tool).
Either way the tool's file closure is everything the target builds plus its
default runfiles.

Precedence: a single produced file wins over an executable output, even when
the target has both.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..codes import ErrorCode
from .artifacts import Artifact
from .depset import DepSet, DepSetBuilder
from .issues import RuntimeIssue, attribute_error
from .targets import TargetHandle


@dataclass(frozen=True)
class CoverageResolution:
    """Resolved coverage tool and its file closure.

    tool and files are both None when no coverage tool was given. files may be
    set while tool is None when resolution failed; issues is non-empty then.
    """
    tool: Optional[Artifact] = None
    files: Optional[DepSet] = None
    issues: List[RuntimeIssue] = field(default_factory=list)


def resolve_coverage_tool(target: Optional[TargetHandle]) -> CoverageResolution:
    """Resolve the coverage_tool attribute to an artifact and file closure."""
    if target is None:
        return CoverageResolution()

    issues: List[RuntimeIssue] = []
    tool: Optional[Artifact] = None
    tool_files = target.files_to_build

    if tool_files.is_singleton():
        tool = tool_files.get_singleton()
    elif target.has_executable():
        tool = target.executable
    else:
        issues.append(attribute_error(
            ErrorCode.COVERAGE_TOOL_UNRESOLVABLE,
            "coverage_tool",
            "must be an executable target or must produce exactly one file.",
        ))

    closure = DepSetBuilder().add_transitive(tool_files)
    if target.has_default_runfiles():
        closure.add_transitive(target.default_runfiles)
    if tool is not None:
        # An executable outside files_to_build still belongs to the closure.
        closure.add(tool)

    return CoverageResolution(tool=tool, files=closure.build(), issues=issues)
