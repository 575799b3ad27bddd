"""Single-pass resolution of py_runtime inputs into a runtime descriptor."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from .attributes import validate_interpreter_attributes
from .coverage import resolve_coverage_tool
from .descriptor import RuntimeDescriptor, build_descriptor
from .inputs import RuntimeInputs
from .issues import RuntimeIssue
from .mode import resolve_mode
from .version import resolve_python_version


class ResolutionResult(BaseModel):
    """Either a descriptor or the non-empty list of errors, never both."""
    ok: bool
    descriptor: Optional[RuntimeDescriptor] = None
    errors: List[RuntimeIssue]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def validate_exclusive(self) -> "ResolutionResult":
        if self.ok != (self.descriptor is not None):
            raise ValueError("descriptor must be present exactly when ok is True")
        if self.ok == bool(self.errors):
            raise ValueError("errors must be empty exactly when ok is True")
        return self


def resolve(inputs: RuntimeInputs) -> ResolutionResult:
    """
    Resolve and validate one py_runtime target.

    Every check runs before the result is decided, so a failing target reports
    all of its attribute problems at once. Errors keep detection order:
    interpreter attributes, then coverage_tool, then python_version.

    This is READ-ONLY - no side effects, no I/O, no shared state.

    Raises:
        InvariantViolation: on an internal defect (never for bad inputs).
    """
    errors: List[RuntimeIssue] = []

    hermetic, attribute_issues = validate_interpreter_attributes(
        inputs.interpreter, inputs.interpreter_path, inputs.files
    )
    errors.extend(attribute_issues)

    coverage = resolve_coverage_tool(inputs.coverage_tool)
    errors.extend(coverage.issues)

    python_version, version_issues = resolve_python_version(
        inputs.python_version, inputs.configuration
    )
    errors.extend(version_issues)

    if errors:
        return ResolutionResult(ok=False, descriptor=None, errors=errors)

    shell = resolve_mode(hermetic, inputs.interpreter, inputs.interpreter_path, inputs.files)
    descriptor = build_descriptor(
        shell,
        coverage,
        python_version,
        inputs.stub_shebang,
        inputs.bootstrap_template,
    )
    return ResolutionResult(ok=True, descriptor=descriptor, errors=[])
