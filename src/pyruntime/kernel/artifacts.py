"""Artifact references: files known to the build graph."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer, model_validator


class Artifact(BaseModel):
    """A file produced or checked in by the build, identified by its exec path.

    The kernel never touches the file itself; it only carries the reference
    through to the descriptor. Artifacts compare and hash by exec path, so the
    same file referenced twice collapses inside a DepSet.
    """
    exec_path: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def coerce_exec_path(cls, data: Any) -> Any:
        """Accept a bare exec path string as shorthand."""
        if isinstance(data, str):
            return {"exec_path": data}
        return data

    @field_validator("exec_path")
    @classmethod
    def validate_exec_path(cls, v: str) -> str:
        """Exec paths are non-empty and relative to the execution root."""
        if not v:
            raise ValueError("Artifact exec path must not be empty")
        if v.startswith("/"):
            raise ValueError(f"Artifact exec path '{v}' must be relative to the execution root")
        return v

    @model_serializer
    def serialize_exec_path(self) -> str:
        return self.exec_path

    def __str__(self) -> str:
        return self.exec_path

    def __repr__(self) -> str:
        return f"Artifact({self.exec_path!r})"
