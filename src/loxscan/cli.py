"""Command-line interface for loxscan."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.debug import dump_tokens
from loxscan.errors import LexError
from loxscan.scanner import scan
from loxscan.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    output_format: str
    show_lines: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Lox lexical scanner",
    )
    p.add_argument("script", nargs="?", help="Lox script to scan (default: interactive prompt)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--show-lines",
        action="store_true",
        default=None,
        help="Prefix each token with its line number",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover loxscan.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump token table to stderr")
    return p


def load_config(config_path: Path | None, script_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else script_dir / "loxscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    script_dir = script.parent if script is not None else Path(".")
    if not script_dir.parts:
        script_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, script_dir)

    output_format = "text"
    show_lines = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format in FORMATS:
            output_format = cfg_format
        cfg_show = cfg_output.get("show_lines")
        if isinstance(cfg_show, bool):
            show_lines = cfg_show

    if args.format is not None:
        output_format = args.format
    if args.show_lines is not None:
        show_lines = args.show_lines

    return CliOptions(
        script=script,
        output_format=output_format,
        show_lines=show_lines,
        debug=args.debug,
    )


def format_tokens(tokens: list[Token], options: CliOptions) -> str:
    """Render tokens as text lines or a JSON array."""
    if options.output_format == "json":
        records = [
            {"kind": t.kind.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}
            for t in tokens
        ]
        return json.dumps(records, ensure_ascii=False, indent=2) + "\n"

    if options.show_lines:
        return "".join(f"{t.line} {t}\n" for t in tokens)
    return "".join(f"{t}\n" for t in tokens)


def run_prompt(
    options: CliOptions,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Scan one line at a time until end of input. Errors do not end the session."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            return
        try:
            tokens = scan(line)
        except LexError as exc:
            print(exc.format(), file=sys.stderr)
            continue
        if options.debug:
            dump_tokens(tokens, file=sys.stderr)
        stdout.write(format_tokens(tokens, options))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    if options.script is None:
        run_prompt(options)
        return 0

    try:
        source = options.script.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.script}: {exc}", file=sys.stderr)
        return 2

    try:
        tokens = scan(source)
    except LexError as exc:
        print(exc.format(), file=sys.stderr)
        print(exc.excerpt(source, str(options.script)), file=sys.stderr)
        return 1

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    sys.stdout.write(format_tokens(tokens, options))
    return 0
