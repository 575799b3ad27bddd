"""pyruntime: resolution and validation of py_runtime build targets."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pyruntime")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from pyruntime.api import (
    resolve_runtime,
    configure_runtime_target,
    load_descriptor,
    ConfiguredRuntimeTarget,
    RuntimeTargetResult,
)
from pyruntime.codes import ErrorCode
from pyruntime.kernel.artifacts import Artifact
from pyruntime.kernel.depset import DepSet
from pyruntime.kernel.descriptor import HermeticRuntime, PlatformRuntime, RuntimeDescriptor, files_to_build
from pyruntime.kernel.inputs import BuildConfiguration, RuntimeInputs
from pyruntime.kernel.issues import InvariantViolation, RuntimeIssue
from pyruntime.kernel.resolve import ResolutionResult, resolve
from pyruntime.kernel.targets import TargetHandle
from pyruntime.kernel.version import PythonVersion

__all__ = [
    "__version__",
    "resolve",
    "resolve_runtime",
    "configure_runtime_target",
    "load_descriptor",
    "ConfiguredRuntimeTarget",
    "RuntimeTargetResult",
    "ResolutionResult",
    "ErrorCode",
    "Artifact",
    "DepSet",
    "HermeticRuntime",
    "PlatformRuntime",
    "RuntimeDescriptor",
    "files_to_build",
    "BuildConfiguration",
    "RuntimeInputs",
    "InvariantViolation",
    "RuntimeIssue",
    "TargetHandle",
    "PythonVersion",
]
