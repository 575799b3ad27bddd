"""pyruntime CLI: resolve py_runtime attribute files into runtime descriptors."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main():
    """Main CLI entry point for pyruntime commands."""
    try:
        pyruntime_version = get_version("pyruntime")
    except PackageNotFoundError:
        pyruntime_version = "dev"

    parser = argparse.ArgumentParser(
        prog="pyruntime",
        description="pyruntime: resolve and validate py_runtime build targets"
    )
    parser.add_argument("--version", action="version", version=f"pyruntime {pyruntime_version}")
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a py_runtime target's attributes into a runtime descriptor",
        parents=[parent_parser]
    )
    resolve_parser.add_argument(
        "--inputs",
        type=Path,
        required=True,
        help="Path to JSON file with the target's attribute values"
    )
    resolve_parser.add_argument(
        "--label",
        default="//:py_runtime",
        help="Target label used in failure messages"
    )
    resolve_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to JSON build configuration (replaces the one in --inputs)"
    )
    resolve_parser.add_argument(
        "--use-toolchains",
        dest="use_toolchains",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override toolchain mode (an explicit python_version is then required)"
    )
    resolve_parser.add_argument(
        "--default-python-version",
        choices=["PY2", "PY3"],
        default=None,
        help="Override the default python version used outside toolchain mode"
    )
    resolve_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the canonical JSON result to this file"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.verbose, args.quiet)

    if args.command == "resolve":
        from ._internal.io import write_canonical
        from .api import configure_runtime_target, load_configuration, load_inputs
        from .kernel.inputs import BuildConfiguration

        inputs_path = args.inputs.resolve()
        try:
            inputs = load_inputs(inputs_path)
            if args.config is not None:
                configuration = load_configuration(args.config.resolve())
            else:
                configuration = inputs.configuration
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        overrides = {}
        if args.use_toolchains is not None:
            overrides["use_toolchains"] = args.use_toolchains
        if args.default_python_version is not None:
            overrides["default_python_version"] = args.default_python_version
        if overrides:
            configuration = BuildConfiguration.model_validate(
                {**configuration.model_dump(), **overrides}
            )
        logger.debug("effective configuration: %s", configuration.model_dump(mode="json"))

        result = configure_runtime_target(args.label, inputs, configuration)

        if args.out is not None:
            report_out = args.out.resolve()
            write_canonical(report_out, result.model_dump(mode="json"))
            if not args.quiet:
                print(f"  Report: {report_out}")

        if not args.quiet:
            status = "OK" if result.ok else "FAILED"
            print(f"[{status}] Resolution complete")
            print(f"  Status: {status}")
            if result.ok:
                print(f"  Runtime: {result.target.provider.kind}")
                print(f"  Python version: {result.target.provider.python_version.value}")
            print(f"  Errors: {len(result.errors)}")
        for line in result.render_errors():
            print(f"  {line}", file=sys.stderr)
        if not result.ok:
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
