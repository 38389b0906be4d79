"""Main CLI entry point for the xml-tidy command-line tool.

Provides format, compress and validate commands over files or standard input.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from xml_tidy import __version__
from xml_tidy.api import XMLTidy
from xml_tidy.shared import (
    CompressStrategy,
    ConfigError,
    EngineConfig,
    TransformMode,
    XMLTidyError,
    get_logger,
)
from xml_tidy.tree import list_backends

STDIN_PATH = "-"

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self, engine_config: Optional[EngineConfig] = None):
        self.engine_config = engine_config or EngineConfig.default()
        self.verbose = False
        self.quiet = False

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON engine configuration file.

        Raises:
            ConfigError: If the file cannot be read or is not a valid configuration
        """
        try:
            text = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        return cls(EngineConfig.from_json(text))

    def apply_arguments(self, args: argparse.Namespace) -> None:
        """Apply command-line overrides on top of the loaded configuration."""
        overrides: Dict[str, Any] = {}

        if getattr(args, "backend", None):
            overrides["parser__backend"] = args.backend
        if getattr(args, "indent", None) is not None:
            overrides["format__indent_size"] = args.indent
            overrides["format__indent_char"] = " "
        if getattr(args, "tabs", False):
            overrides["format__indent_size"] = 1
            overrides["format__indent_char"] = "\t"
        if getattr(args, "strategy", None):
            overrides["compress__strategy"] = CompressStrategy[args.strategy.upper()]
        if getattr(args, "self_close", False):
            overrides["compress__self_close_empty"] = True

        if overrides:
            self.engine_config = self.engine_config.override(**overrides)

        self.verbose = args.verbose
        self.quiet = args.quiet


class XMLProcessor:
    """Core XML processing logic for CLI operations."""

    def __init__(self, config: CLIConfig):
        self.config = config
        self.engine = XMLTidy(config.engine_config)
        self.logger = get_logger(__name__, None, "cli_processor")

    @staticmethod
    def read_source(path: str) -> str:
        """Read XML text from ``path`` or from stdin for ``-``."""
        if path == STDIN_PATH:
            return sys.stdin.read()
        return Path(path).read_text(encoding="utf-8-sig")

    def transform_source(self, path: str, mode: TransformMode) -> str:
        """Read one source and return its formatted or compressed text."""
        text = self.read_source(path)
        result = self.engine.transform(text, mode)
        self.logger.debug(
            "Source transformed",
            extra={
                "source": path,
                "mode": mode.value,
                "element_count": result.metrics.element_count,
                "processing_time_ms": result.metrics.processing_time_ms,
            },
        )
        return result.output

    def validate_source(self, path: str) -> Dict[str, Any]:
        """Validate one source and return a JSON-ready report."""
        try:
            text = self.read_source(path)
        except (OSError, UnicodeDecodeError) as e:
            return {"file": path, "valid": False, "error": str(e)}

        report = self.engine.validate(text)
        return {"file": path, **report.to_dict()}


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-tidy",
        description="Format and compress XML documents with well-formedness checking"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON engine configuration file"
    )
    parser.add_argument(
        "--backend",
        choices=list_backends(),
        help="Parser backend used for well-formedness checking"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Format command
    format_parser = subparsers.add_parser("format", help="Pretty-print XML")
    _add_io_arguments(format_parser)
    indent_group = format_parser.add_mutually_exclusive_group()
    indent_group.add_argument(
        "--indent", "-i",
        type=int,
        help="Spaces per indentation level (default: 4)"
    )
    indent_group.add_argument(
        "--tabs",
        action="store_true",
        help="Indent with tabs"
    )

    # Compress command
    compress_parser = subparsers.add_parser("compress", help="Compact XML onto one line")
    _add_io_arguments(compress_parser)
    compress_parser.add_argument(
        "--strategy", "-s",
        choices=[strategy.name.lower() for strategy in CompressStrategy],
        help="Compression strategy (default: tree)"
    )
    compress_parser.add_argument(
        "--self-close",
        action="store_true",
        help="Write empty elements as <name/>"
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check XML well-formedness")
    validate_parser.add_argument(
        "paths",
        nargs="+",
        help="XML files to validate ('-' reads stdin)"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["json", "text"],
        default="text",
        help="Output format"
    )

    return parser


def _add_io_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "paths",
        nargs="*",
        default=[STDIN_PATH],
        help="XML files to process (default: stdin)"
    )
    output_group = subparser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output", "-o",
        type=Path,
        help="Output file (default: stdout)"
    )
    output_group.add_argument(
        "--in-place",
        action="store_true",
        help="Rewrite each input file with the result"
    )


def format_validation_results(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format validation results for output."""
    if format_type == "json":
        return json.dumps(results, indent=2)

    valid_count = sum(1 for r in results if r.get("valid", False))
    lines = [f"Validated {len(results)} files, {valid_count} valid", "-" * 50]
    for result in results:
        status = "✓" if result.get("valid", False) else "✗"
        lines.append(f"{status} {result['file']}")
        if not result.get("valid", False):
            lines.append(f"   Error: {result.get('error', '')}")
    return "\n".join(lines)


def cmd_transform(
    args: argparse.Namespace,
    processor: XMLProcessor,
    mode: TransformMode
) -> int:
    """Handle format and compress commands."""
    if args.in_place and STDIN_PATH in args.paths:
        print("--in-place cannot be used with stdin", file=sys.stderr)
        return EXIT_USAGE

    outputs = []
    exit_code = EXIT_OK

    for path in args.paths:
        try:
            output = processor.transform_source(path, mode)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading {path}: {e}", file=sys.stderr)
            exit_code = EXIT_INVALID_INPUT
            continue
        except XMLTidyError as e:
            label = "<stdin>" if path == STDIN_PATH else path
            print(f"{label}: {e}", file=sys.stderr)
            exit_code = EXIT_INVALID_INPUT
            continue

        if args.in_place:
            Path(path).write_text(output + "\n", encoding="utf-8")
            if not processor.config.quiet:
                print(f"Rewrote {path}", file=sys.stderr)
        else:
            outputs.append(output)

    if outputs:
        text = "\n".join(outputs) + "\n"
        if args.output:
            try:
                args.output.write_text(text, encoding="utf-8")
            except OSError as e:
                print(f"Error writing output: {e}", file=sys.stderr)
                return EXIT_INVALID_INPUT
        else:
            sys.stdout.write(text)

    return exit_code


def cmd_validate(args: argparse.Namespace, processor: XMLProcessor) -> int:
    """Handle validate command."""
    results = [processor.validate_source(path) for path in args.paths]

    if not processor.config.quiet or args.format == "json":
        print(format_validation_results(results, args.format))

    valid_count = sum(1 for r in results if r.get("valid", False))
    return EXIT_OK if valid_count == len(results) else EXIT_INVALID_INPUT


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_USAGE

    try:
        config = CLIConfig.from_file(args.config) if args.config else CLIConfig()
        config.apply_arguments(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Verbosity flags win over the configured level
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif config.quiet:
        logging.basicConfig(level=logging.ERROR)
    else:
        logging.basicConfig(level=config.engine_config.logging_level)

    try:
        processor = XMLProcessor(config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    # Route to appropriate command handler
    try:
        if args.command == "format":
            return cmd_transform(args, processor, TransformMode.FORMAT)
        elif args.command == "compress":
            return cmd_transform(args, processor, TransformMode.COMPRESS)
        elif args.command == "validate":
            return cmd_validate(args, processor)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return EXIT_USAGE

    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
