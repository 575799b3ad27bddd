"""Capability view of a dependency target.

A target is never inspected for its concrete rule kind. Callers ask three
independent questions, each of which may have no answer:

- files_to_build: the files the target produces (always answered)
- executable: the designated executable output, if the target is runnable
- default_runfiles: the default run-time dependency files, if it has any
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .artifacts import Artifact
from .depset import DepSet


class TargetHandle(BaseModel):
    """A resolved dependency target and the capabilities it exposes."""
    label: str
    files_to_build: DepSet = Field(default_factory=DepSet.empty)
    executable: Optional[Artifact] = None
    default_runfiles: Optional[DepSet] = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    def has_executable(self) -> bool:
        return self.executable is not None

    def has_default_runfiles(self) -> bool:
        return self.default_runfiles is not None
