# src/tagscan_cli/core/cli_parser.py
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError

from tagscan.model import ExtractMode, ExtractRequest
from tagscan_cli.model import CliArgs

logger = logging.getLogger(__name__)

usage_text = """
Usage: tagscan <markup> <tag> [attr_name] [attr_value]
       tagscan <markup> <tag> --content
       tagscan <markup> <tag> <attr_name> --attr-values
       tagscan --file <path> <tag> [attr_name] [attr_value|--attr-values|--content]

  <markup>          Raw HTML to scan (quote it in the shell).
  --file <path>     Read the markup from a file instead.
  --content         Print the inner text of every <tag>...</tag>.
  --attr-values     Print the value of <attr_name> on every matching tag.
  --log-level L     Override the configured log level (e.g. DEBUG).
  --set KEY=VALUE   Override a setting for this run (e.g. output.format=lines).
  --                Treat everything after it as positionals.

Positionals may start with a single dash (e.g. an attribute value `-x`).
""".strip()

# Options that take a value, and flags that do not.
_VALUE_OPTIONS = ("--file", "--log-level", "--set")
_FLAG_OPTIONS = ("--content", "--attr-values", "-h", "--help")


class CliArgumentError(ValueError):
    """Raised for command lines that cannot be turned into an extraction."""


class _RaisingArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise CliArgumentError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(prog="tagscan", add_help=False, allow_abbrev=False, usage=usage_text)
    # A bare `--file` stores "" and falls through to the usage branch.
    parser.add_argument("--file", dest="file_path", nargs="?", const="", default=None)
    parser.add_argument("--content", action="store_true")
    parser.add_argument("--attr-values", dest="attr_values", action="store_true")
    parser.add_argument("--log-level", dest="log_level", default=None)
    parser.add_argument("--set", dest="overrides", action="append", default=[])
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def _split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separates declared options from positionals, keeping positionals in order.

    Option values are joined as `--opt=value` so argparse never mistakes a
    value for an option. Any token that is not a declared option and does not
    start with `--` is a positional, as is everything after a bare `--`.
    Unknown `--` options are left for argparse to reject.
    """
    options: List[str] = []
    positionals: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            positionals.extend(tokens)
            break
        name = token.split("=", 1)[0]
        if token in _VALUE_OPTIONS:
            value = next(tokens, None)
            options.append(token if value is None else f"{token}={value}")
        elif name in _VALUE_OPTIONS or token in _FLAG_OPTIONS or token.startswith("--"):
            options.append(token)
        else:
            positionals.append(token)
    return options, positionals


def _parse_overrides(entries: List[str]) -> List[Tuple[str, str]]:
    overrides = []
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep or not key.strip():
            raise CliArgumentError(f"--set expects KEY=VALUE, got '{entry}'")
        overrides.append((key.strip(), value))
    return overrides


def parse_cli_args(argv: List[str]) -> Optional[CliArgs]:
    """
    Turns argv (without the program name) into CliArgs.

    Returns None when the usage text should be shown instead: on -h/--help
    or when fewer than two positionals (markup or --file path, and tag) are given.
    Raises CliArgumentError for anything else that cannot be run.
    """
    options, positionals = _split_argv(argv)
    pargs = _build_parser().parse_args(options)
    if pargs.help:
        return None

    markup: Optional[str] = None
    if pargs.file_path is None:
        if len(positionals) < 2:
            return None
        markup = positionals.pop(0)
    elif not pargs.file_path or not positionals:
        return None

    tag = positionals.pop(0)
    attr_name = positionals.pop(0) if positionals else None
    attr_value = positionals.pop(0) if positionals else None
    if positionals:
        raise CliArgumentError(f"unexpected arguments: {' '.join(positionals)}")

    if pargs.content and pargs.attr_values:
        raise CliArgumentError("--content and --attr-values cannot be combined")

    if pargs.content:
        if attr_name is not None:
            logger.warning("Ignoring attribute arguments with --content: %s", attr_name)
        mode, attr_name, attr_value = ExtractMode.CONTENT, None, None
    elif pargs.attr_values:
        if attr_value is not None:
            raise CliArgumentError("--attr-values takes an attribute name but no attribute value")
        mode = ExtractMode.ATTRIBUTE_VALUES
    elif attr_name is not None:
        mode = ExtractMode.TAGS_WITH_ATTRIBUTE
    else:
        mode = ExtractMode.TAGS

    try:
        request = ExtractRequest(tag=tag, mode=mode, attr_name=attr_name, attr_value=attr_value)
    except ValidationError as e:
        raise CliArgumentError("; ".join(err["msg"] for err in e.errors())) from e

    return CliArgs(
        markup=markup,
        file_path=pargs.file_path,
        request=request,
        log_level=pargs.log_level,
        overrides=_parse_overrides(pargs.overrides),
    )
