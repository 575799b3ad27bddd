"""Runtime descriptor models and the builder that assembles them.

A descriptor is a tagged union: HermeticRuntime carries an in-build
interpreter and its files, PlatformRuntime carries an absolute interpreter
path. Fields that are illegal for a variant do not exist on it.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

from .artifacts import Artifact
from .attributes import is_absolute_path
from .coverage import CoverageResolution
from .depset import DepSet, DepSetBuilder
from .mode import HermeticShell, RuntimeShell
from .version import PythonVersion, check_target_value


class _RuntimeBase(BaseModel):
    """Fields shared by both runtime variants."""
    coverage_tool: Optional[Artifact] = None
    coverage_files: Optional[DepSet] = None
    python_version: PythonVersion
    stub_shebang: str
    bootstrap_template: Optional[Artifact] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("python_version")
    @classmethod
    def validate_python_version(cls, v: PythonVersion) -> PythonVersion:
        """Descriptors only ever hold PY2 or PY3."""
        if not v.is_target_value():
            raise ValueError("python_version must be a target value ('PY2' or 'PY3')")
        return v

    @model_validator(mode="after")
    def validate_coverage_pairing(self) -> "_RuntimeBase":
        """coverage_files is present iff coverage_tool is."""
        if (self.coverage_tool is None) != (self.coverage_files is None):
            raise ValueError("coverage_tool and coverage_files must be set together")
        return self

    def is_in_build(self) -> bool:
        return False

    def files_to_build(self) -> DepSet:
        return DepSet.empty()


class HermeticRuntime(_RuntimeBase):
    """Runtime whose interpreter is built or checked in."""
    kind: Literal["in_build"] = "in_build"
    interpreter: Artifact
    files: DepSet

    def is_in_build(self) -> bool:
        return True

    def files_to_build(self) -> DepSet:
        """The interpreter followed by the support files."""
        return (
            DepSetBuilder()
            .add_transitive(DepSet.of([self.interpreter]))
            .add_transitive(self.files)
            .build()
        )


class PlatformRuntime(_RuntimeBase):
    """Runtime whose interpreter lives at an absolute path on the host."""
    kind: Literal["platform"] = "platform"
    interpreter_path: str

    @field_validator("interpreter_path")
    @classmethod
    def validate_interpreter_path(cls, v: str) -> str:
        if not is_absolute_path(v):
            raise ValueError(f"interpreter_path '{v}' must be absolute")
        return v


RuntimeDescriptor = Annotated[
    Union[HermeticRuntime, PlatformRuntime],
    Field(discriminator="kind"),
]

runtime_descriptor_adapter: TypeAdapter = TypeAdapter(RuntimeDescriptor)


def files_to_build(descriptor: RuntimeDescriptor) -> List[Artifact]:
    """Files a py_runtime target builds: the in-build interpreter and its files, or nothing."""
    return descriptor.files_to_build().to_list()


def build_descriptor(
    shell: RuntimeShell,
    coverage: CoverageResolution,
    python_version: Optional[PythonVersion],
    stub_shebang: str,
    bootstrap_template: Optional[Artifact],
) -> RuntimeDescriptor:
    """Assemble the descriptor from already-resolved parts.

    Callers invoke this only when no issue was reported upstream.

    Raises:
        InvariantViolation: if python_version is not a target value.
    """
    common = dict(
        coverage_tool=coverage.tool,
        coverage_files=coverage.files,
        python_version=check_target_value(python_version),
        stub_shebang=stub_shebang,
        bootstrap_template=bootstrap_template,
    )
    if isinstance(shell, HermeticShell):
        return HermeticRuntime(interpreter=shell.interpreter, files=shell.files, **common)
    return PlatformRuntime(interpreter_path=shell.interpreter_path, **common)
