"""
varresolver command line

Resolve scheme-prefixed values and expand ${...} tokens from the shell.

Usage:
    varresolver resolve env:HOME "yaml:config.yaml//servers.[name=api].port"
    varresolver interpolate "listening on ${env:HOST}:${env:PORT}"
    varresolver interpolate -f template.txt
    varresolver get config.yaml "servers.0.host"
"""

import argparse
import json
import sys
import tomllib
from pathlib import Path
from typing import Any, List, Optional

import yaml
from rich.markup import escape

from .config import ResolverConfig, build_registry, load_config
from .display import ICONS, console, error_console
from .errors import ConfigError, ResolverError
from .registry import Registry
from .selector import select
from .values import VString, from_native, to_native

EXIT_OK = 0
EXIT_RESOLVE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="varresolver",
        description="Resolve scheme-prefixed values and ${...} interpolation tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{ICONS['arrow']} Schemes:
    env:NAME                        environment variable
    json:FILE//key.path             value from a JSON file
    yaml:FILE//servers.[name=api]   value from a YAML file
    toml:FILE//table.key            value from a TOML file
    ini:FILE//Section.Key           value from an INI file
    file:FILE//KEY                  value from a KEY=VALUE file
        """,
    )
    parser.add_argument(
        "-c",
        "--config",
        dest="config_file",
        default=None,
        help="Path to a config file (default: .varresolver.yml in the current directory)",
    )
    parser.add_argument(
        "--max-passes",
        type=int,
        default=None,
        help="Maximum interpolation passes (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve one or more values")
    resolve_parser.add_argument("values", nargs="+", help="Values such as env:HOME")
    resolve_parser.add_argument(
        "--best-effort",
        action="store_true",
        default=False,
        help="Resolve every value and report all errors instead of stopping at the first",
    )

    interpolate_parser = subparsers.add_parser(
        "interpolate", help="Expand ${...} tokens in text"
    )
    source = interpolate_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("text", nargs="?", default=None, help="Text to expand")
    source.add_argument("-f", "--file", dest="input_file", default=None, help="Read text from a file")

    get_parser = subparsers.add_parser(
        "get", help="Select a value from a JSON, YAML or TOML file"
    )
    get_parser.add_argument("file", help="Data file (.json, .yaml, .yml, .toml)")
    get_parser.add_argument("path", help="Path expression, e.g. servers.[name=api].port")

    return parser


def _print_error(message: str) -> None:
    error_console.print(f"[bold red]{ICONS['cross']} {escape(message)}[/bold red]")


def _print_value(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _load_data_file(path: Path) -> Any:
    """Decode a data file by extension into plain Python data."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r") as f:
            return json.load(f)
    if suffix in (".yaml", ".yml"):
        with open(path, "r") as f:
            return yaml.safe_load(f)
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    raise ValueError(f"Unsupported file type: {path.suffix or path.name}")


def _cmd_resolve(registry: Registry, args: argparse.Namespace, config: ResolverConfig) -> int:
    if args.best_effort or not config.strict:
        outputs, errors = registry.resolve_slice_best_effort(args.values)
        for output in outputs:
            _print_value(output)
        for error in errors:
            _print_error(str(error))
        return EXIT_RESOLVE_ERROR if errors else EXIT_OK

    try:
        outputs = registry.resolve_slice(args.values)
    except ResolverError as e:
        _print_error(str(e))
        return EXIT_RESOLVE_ERROR

    for output in outputs:
        _print_value(output)
    return EXIT_OK


def _cmd_interpolate(registry: Registry, args: argparse.Namespace) -> int:
    if args.input_file:
        try:
            text = Path(args.input_file).read_text()
        except OSError as e:
            _print_error(f"Cannot read {args.input_file}: {e}")
            return EXIT_USAGE_ERROR
    else:
        text = args.text

    try:
        result = registry.resolve_string(text)
    except ResolverError as e:
        _print_error(str(e))
        return EXIT_RESOLVE_ERROR

    _print_value(result)
    return EXIT_OK


def _cmd_get(args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        data = _load_data_file(path)
    except FileNotFoundError:
        _print_error(f"File not found: {path}")
        return EXIT_RESOLVE_ERROR
    except (OSError, ValueError, yaml.YAMLError) as e:
        _print_error(f"Cannot load {path}: {e}")
        return EXIT_USAGE_ERROR

    try:
        result = select(from_native(data), args.path)
    except ResolverError as e:
        _print_error(f"{args.path}: {e}")
        return EXIT_RESOLVE_ERROR

    if isinstance(result, VString):
        _print_value(result.value)
    else:
        _print_value(json.dumps(to_native(result)))
    return EXIT_OK


def run(argv: Optional[List[str]] = None) -> int:
    """Run the command line and return the exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config_file) if args.config_file else None)
    except (ConfigError, FileNotFoundError) as e:
        _print_error(str(e))
        return EXIT_USAGE_ERROR

    if args.max_passes is not None:
        if args.max_passes < 1:
            _print_error("--max-passes must be at least 1")
            return EXIT_USAGE_ERROR
        config.max_passes = args.max_passes

    registry = build_registry(config)

    if args.command == "resolve":
        return _cmd_resolve(registry, args, config)
    if args.command == "interpolate":
        return _cmd_interpolate(registry, args)
    return _cmd_get(args)


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
