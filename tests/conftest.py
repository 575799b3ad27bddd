"""Pytest configuration and shared builders for pyruntime tests.

No sys.path hacks - tests should import from the installed pyruntime package.
"""

import pytest

from pyruntime.kernel.artifacts import Artifact
from pyruntime.kernel.depset import DepSet
from pyruntime.kernel.inputs import BuildConfiguration, RuntimeInputs
from pyruntime.kernel.targets import TargetHandle
from pyruntime.kernel.version import PythonVersion


def _artifacts(*paths):
    """Build a list of artifacts from exec paths."""
    return [Artifact(exec_path=p) for p in paths]


def _depset(*paths):
    return DepSet.of(_artifacts(*paths))


@pytest.fixture
def legacy_config():
    """Build configuration with toolchains disabled and PY2 default."""
    return BuildConfiguration(use_toolchains=False, default_python_version=PythonVersion.PY2)


@pytest.fixture
def toolchain_config():
    return BuildConfiguration(use_toolchains=True, default_python_version=PythonVersion.PY3)


@pytest.fixture
def hermetic_inputs(legacy_config):
    """Scenario A inputs: in-build interpreter with one support file."""
    return RuntimeInputs(
        interpreter=Artifact(exec_path="bin/python3"),
        files=_depset("lib/foo.py"),
        python_version=PythonVersion.PY3,
        configuration=legacy_config,
    )


@pytest.fixture
def platform_inputs(legacy_config):
    """Scenario B inputs: platform interpreter, version left unspecified."""
    return RuntimeInputs(
        interpreter_path="/usr/bin/python3",
        configuration=legacy_config,
    )


@pytest.fixture
def executable_coverage_target():
    """Executable coverage target producing two files, with default runfiles."""
    return TargetHandle(
        label="//tools:coverage",
        files_to_build=_depset("tools/coverage", "tools/coverage.zip"),
        executable=Artifact(exec_path="tools/coverage"),
        default_runfiles=_depset("tools/coverage", "third_party/coverage/__init__.py"),
    )
