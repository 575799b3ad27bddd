"""Public API for the pyruntime package.

High-level functions that accept typed models, plain dicts or JSON file paths
and return complete, structured results. Callers should use these functions
instead of importing from _internal.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pyruntime._internal.io import load_json
from pyruntime.codes import ErrorCode
from pyruntime.kernel.depset import DepSet
from pyruntime.kernel.descriptor import (
    HermeticRuntime,
    PlatformRuntime,
    RuntimeDescriptor,
    runtime_descriptor_adapter,
)
from pyruntime.kernel.inputs import BuildConfiguration, RuntimeInputs
from pyruntime.kernel.issues import RuntimeIssue, rule_error
from pyruntime.kernel.resolve import ResolutionResult, resolve

logger = logging.getLogger(__name__)

InputsSource = Union[RuntimeInputs, Dict, str, os.PathLike, Path]
ConfigurationSource = Union[BuildConfiguration, Dict, str, os.PathLike, Path]
DescriptorSource = Union[HermeticRuntime, PlatformRuntime, Dict, str, os.PathLike, Path]


def _normalize_path(path: Union[str, os.PathLike, Path]) -> Path:
    """Normalize path input to Path object."""
    return Path(path) if not isinstance(path, Path) else path


def _load_payload(source, what: str) -> Dict:
    """Return a dict source as-is, or read it from a JSON file path."""
    if isinstance(source, dict):
        return source
    if isinstance(source, (str, os.PathLike)):
        return load_json(_normalize_path(source))
    raise TypeError(f"Unsupported {what} source: {type(source).__name__}")


def load_inputs(source: InputsSource) -> RuntimeInputs:
    """Load RuntimeInputs from a model, dict or JSON file.

    Raises:
        ValidationError: if the payload does not match the inputs schema
        OSError, ValueError: if the file cannot be read or parsed
        TypeError: if source is none of the accepted kinds
    """
    if isinstance(source, RuntimeInputs):
        return source
    return RuntimeInputs.model_validate(_load_payload(source, "inputs"))


def load_configuration(source: ConfigurationSource) -> BuildConfiguration:
    """Load BuildConfiguration from a model, dict or JSON file."""
    if isinstance(source, BuildConfiguration):
        return source
    return BuildConfiguration.model_validate(_load_payload(source, "configuration"))


def load_descriptor(source: DescriptorSource) -> RuntimeDescriptor:
    """Load a runtime descriptor from a model, dict or JSON file.

    The "kind" field selects the in-build or platform variant, so the
    provider dumped by a configured target loads back as the same variant.
    """
    if isinstance(source, (HermeticRuntime, PlatformRuntime)):
        return source
    return runtime_descriptor_adapter.validate_python(_load_payload(source, "descriptor"))


def _structure_failure(what: str, exc: Exception) -> ResolutionResult:
    return ResolutionResult(
        ok=False,
        descriptor=None,
        errors=[rule_error(ErrorCode.INVALID_STRUCTURE, f"Failed to parse {what}: {exc}")],
    )


def resolve_runtime(
    inputs: InputsSource,
    configuration: Optional[ConfigurationSource] = None,
) -> ResolutionResult:
    """
    Resolve a py_runtime target's attributes into a runtime descriptor.

    Args:
        inputs: Attribute values (RuntimeInputs, dict, or path to JSON)
        configuration: Optional build configuration; replaces the one carried
            by inputs when given

    Returns:
        ResolutionResult with either a descriptor or every error found.
        Unparseable inputs yield a single INVALID_STRUCTURE error.

    This is READ-ONLY apart from reading the given files.
    """
    try:
        inputs_obj = load_inputs(inputs)
    except (ValidationError, ValueError, OSError, TypeError) as e:
        logger.info("py_runtime inputs could not be parsed: %s", e)
        return _structure_failure("inputs", e)

    if configuration is not None:
        try:
            config_obj = load_configuration(configuration)
        except (ValidationError, ValueError, OSError, TypeError) as e:
            logger.info("build configuration could not be parsed: %s", e)
            return _structure_failure("configuration", e)
        inputs_obj = inputs_obj.model_copy(update={"configuration": config_obj})

    logger.debug(
        "resolving py_runtime (use_toolchains=%s, default_python_version=%s)",
        inputs_obj.configuration.use_toolchains,
        inputs_obj.configuration.default_python_version.value,
    )
    result = resolve(inputs_obj)
    if result.ok:
        logger.debug("resolved %s runtime", result.descriptor.kind)
    else:
        logger.info(
            "py_runtime resolution failed: %s",
            ", ".join(issue.code.value for issue in result.errors),
        )
    return result


class ConfiguredRuntimeTarget(BaseModel):
    """A py_runtime target as handed to the rest of the build."""
    label: str
    provider: RuntimeDescriptor
    files_to_build: DepSet
    runfiles: DepSet = Field(default_factory=DepSet.empty)

    model_config = ConfigDict(frozen=True, extra="forbid")


class RuntimeTargetResult(BaseModel):
    """Outcome of configuring one py_runtime target."""
    label: str
    ok: bool
    target: Optional[ConfiguredRuntimeTarget] = None
    errors: List[RuntimeIssue]

    model_config = ConfigDict(frozen=True, extra="forbid")

    def render_errors(self) -> List[str]:
        """One failure line per error, prefixed with the target label."""
        return [f"{self.label}: {e.render()}" for e in self.errors]


def configure_runtime_target(
    label: str,
    inputs: InputsSource,
    configuration: Optional[ConfigurationSource] = None,
) -> RuntimeTargetResult:
    """Resolve inputs and wrap the descriptor as a configured target.

    The target's files_to_build are the in-build interpreter and its files
    (empty for platform runtimes); its runfiles are always empty.
    """
    result = resolve_runtime(inputs, configuration)
    if not result.ok:
        return RuntimeTargetResult(label=label, ok=False, target=None, errors=result.errors)

    descriptor = result.descriptor
    target = ConfiguredRuntimeTarget(
        label=label,
        provider=descriptor,
        files_to_build=descriptor.files_to_build(),
    )
    return RuntimeTargetResult(label=label, ok=True, target=target, errors=[])
