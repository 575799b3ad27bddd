"""Typed inputs to py_runtime resolution."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .artifacts import Artifact
from .depset import DepSet
from .targets import TargetHandle
from .version import PythonVersion


DEFAULT_STUB_SHEBANG = "#!/usr/bin/env python3"


class BuildConfiguration(BaseModel):
    """Ambient build configuration consulted by the version resolver."""
    use_toolchains: bool = True
    default_python_version: PythonVersion = PythonVersion.PY3

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("default_python_version")
    @classmethod
    def validate_default_python_version(cls, v: PythonVersion) -> PythonVersion:
        """The default must itself be a target value."""
        if not v.is_target_value():
            raise ValueError("default_python_version must be 'PY2' or 'PY3'")
        return v


class RuntimeInputs(BaseModel):
    """Attribute values of one py_runtime target, already type-checked.

    interpreter_path uses the empty string for "not set", matching how string
    attributes default.
    """
    interpreter: Optional[Artifact] = None
    interpreter_path: str = ""
    files: DepSet = Field(default_factory=DepSet.empty)
    coverage_tool: Optional[TargetHandle] = None
    python_version: PythonVersion = PythonVersion.UNSPECIFIED
    stub_shebang: str = DEFAULT_STUB_SHEBANG
    bootstrap_template: Optional[Artifact] = None
    configuration: BuildConfiguration = Field(default_factory=BuildConfiguration)

    model_config = ConfigDict(frozen=True, extra="forbid")
