"""Projection of validated interpreter attributes onto a runtime variant."""

from dataclasses import dataclass
from typing import Optional, Union

from .artifacts import Artifact
from .attributes import normalize_interpreter_path
from .depset import DepSet


@dataclass(frozen=True)
class HermeticShell:
    """In-build interpreter and its support files."""
    interpreter: Artifact
    files: DepSet


@dataclass(frozen=True)
class PlatformShell:
    """Absolute path of a platform interpreter."""
    interpreter_path: str


RuntimeShell = Union[HermeticShell, PlatformShell]


def resolve_mode(
    hermetic: bool,
    interpreter: Optional[Artifact],
    interpreter_path: str,
    files: DepSet,
) -> RuntimeShell:
    """Pick the variant selected by the validator's hermetic flag.

    Only called on inputs that passed validation, so the field the variant
    needs is always present.
    """
    if hermetic:
        return HermeticShell(interpreter=interpreter, files=files)
    return PlatformShell(interpreter_path=normalize_interpreter_path(interpreter_path))
