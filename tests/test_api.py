"""Contract tests for pyruntime.api.

Tests that the public functions accept models, dicts and JSON files, that
unparseable payloads become INVALID_STRUCTURE errors, and that configured
targets carry the expected files_to_build and runfiles.
"""

import json
import logging
from pathlib import Path

from pyruntime.api import (
    ConfiguredRuntimeTarget,
    configure_runtime_target,
    load_configuration,
    load_descriptor,
    resolve_runtime,
)
from pyruntime.codes import ErrorCode
from pyruntime.kernel.artifacts import Artifact
from pyruntime.kernel.descriptor import HermeticRuntime, PlatformRuntime
from pyruntime.kernel.inputs import BuildConfiguration
from pyruntime.kernel.version import PythonVersion


def artifacts(*paths):
    """Build a list of artifacts from exec paths."""
    return [Artifact(exec_path=p) for p in paths]


HERMETIC_PAYLOAD = {
    "interpreter": "bin/python3",
    "files": ["lib/foo.py"],
    "python_version": "PY3",
    "configuration": {"use_toolchains": False},
}

PLATFORM_PAYLOAD = {
    "interpreter_path": "/usr/bin/python3",
    "configuration": {"use_toolchains": False, "default_python_version": "PY2"},
}


def _write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def test_resolve_runtime_from_dict():
    result = resolve_runtime(HERMETIC_PAYLOAD)
    assert result.ok is True
    assert result.descriptor.kind == "in_build"


def test_resolve_runtime_from_path(tmp_path):
    inputs_path = _write_json(tmp_path / "inputs.json", PLATFORM_PAYLOAD)
    result = resolve_runtime(inputs_path)
    assert result.ok is True
    assert result.descriptor.python_version is PythonVersion.PY2

    # str paths are accepted as well
    assert resolve_runtime(str(inputs_path)) == result


def test_configuration_argument_replaces_inputs_configuration():
    result = resolve_runtime(PLATFORM_PAYLOAD, {"use_toolchains": True})
    assert result.ok is False
    assert [e.code for e in result.errors] == [ErrorCode.VERSION_REQUIRED_IN_TOOLCHAIN_MODE]


def test_configuration_from_path(tmp_path):
    config_path = _write_json(
        tmp_path / "config.json",
        {"use_toolchains": False, "default_python_version": "PY3"},
    )
    assert load_configuration(config_path) == BuildConfiguration(
        use_toolchains=False, default_python_version=PythonVersion.PY3
    )
    result = resolve_runtime(PLATFORM_PAYLOAD, config_path)
    assert result.descriptor.python_version is PythonVersion.PY3


def test_invalid_inputs_structure():
    result = resolve_runtime({"interpreter": "bin/python3", "unknown_attr": 1})
    assert result.ok is False
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]
    assert result.errors[0].message.startswith("Failed to parse inputs")


def test_invalid_python_version_string():
    payload = dict(HERMETIC_PAYLOAD, python_version="PY4")
    result = resolve_runtime(payload)
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]


def test_unsupported_inputs_source():
    result = resolve_runtime([1, 2])
    assert result.ok is False
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]
    assert "Unsupported inputs source: list" in result.errors[0].message


def test_unsupported_configuration_source():
    result = resolve_runtime(PLATFORM_PAYLOAD, 3)
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]
    assert "configuration" in result.errors[0].message


def test_missing_inputs_file(tmp_path):
    result = resolve_runtime(tmp_path / "missing.json")
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]


def test_invalid_configuration_structure():
    result = resolve_runtime(PLATFORM_PAYLOAD, {"default_python_version": "_INTERNAL_SENTINEL"})
    assert [e.code for e in result.errors] == [ErrorCode.INVALID_STRUCTURE]
    assert "configuration" in result.errors[0].message


def test_failed_resolution_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="pyruntime.api"):
        resolve_runtime({"interpreter_path": "relpath/python3", "python_version": "PY3"})
    assert "ATTRIBUTE_INVALID" in caplog.text


def test_configure_hermetic_target():
    result = configure_runtime_target("//python:runtime", HERMETIC_PAYLOAD)
    assert result.ok is True
    assert result.label == "//python:runtime"
    target = result.target
    assert isinstance(target, ConfiguredRuntimeTarget)
    assert target.files_to_build.to_list() == artifacts("bin/python3", "lib/foo.py")
    assert target.runfiles.is_empty()
    assert target.provider.interpreter == Artifact(exec_path="bin/python3")


def test_configure_platform_target_builds_nothing():
    result = configure_runtime_target("//python:system", PLATFORM_PAYLOAD)
    assert result.ok is True
    assert result.target.files_to_build.is_empty()


def test_configure_failure_names_target():
    result = configure_runtime_target(
        "//python:broken",
        {"interpreter_path": "relpath/python3", "files": ["lib/foo.py"], "python_version": "PY3"},
    )
    assert result.ok is False
    assert result.target is None
    assert result.render_errors() == [
        "//python:broken: ATTRIBUTE_CONFLICT: if 'interpreter_path' is given then 'files' must be empty",
        "//python:broken: ATTRIBUTE_INVALID: in interpreter_path attribute: must be an absolute path.",
    ]


def test_result_serializes_to_json():
    result = configure_runtime_target("//python:runtime", HERMETIC_PAYLOAD)
    dumped = result.model_dump(mode="json")
    assert dumped["target"]["provider"] == {
        "kind": "in_build",
        "interpreter": "bin/python3",
        "files": ["lib/foo.py"],
        "coverage_tool": None,
        "coverage_files": None,
        "python_version": "PY3",
        "stub_shebang": "#!/usr/bin/env python3",
        "bootstrap_template": None,
    }
    assert dumped["target"]["files_to_build"] == ["bin/python3", "lib/foo.py"]
    assert dumped["target"]["runfiles"] == []


def test_dumped_provider_loads_back(tmp_path):
    provider = configure_runtime_target("//python:runtime", HERMETIC_PAYLOAD).target.provider
    dumped = provider.model_dump(mode="json")

    loaded = load_descriptor(dumped)
    assert isinstance(loaded, HermeticRuntime)
    assert loaded == provider
    assert loaded.files_to_build().to_list() == artifacts("bin/python3", "lib/foo.py")

    descriptor_path = _write_json(tmp_path / "descriptor.json", dumped)
    assert load_descriptor(descriptor_path) == provider


def test_load_descriptor_selects_platform_variant():
    provider = configure_runtime_target("//python:system", PLATFORM_PAYLOAD).target.provider
    loaded = load_descriptor(provider.model_dump(mode="json"))
    assert isinstance(loaded, PlatformRuntime)
    assert loaded.interpreter_path == "/usr/bin/python3"
    assert load_descriptor(loaded) is loaded
