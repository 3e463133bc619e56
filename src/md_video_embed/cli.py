#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/cli.py
"""Command line interface for md_video_embed.

Converts a markdown file (or stdin) to HTML with video blocks embedded.

Provider options come from a configuration file whose top-level tables are
keyed by provider identifier, for example ``.md-video-embed.toml``::

    [youtube]
    mode = "embedlite"
    use_default_css = true

When ``--config`` is not given, the first of ``.md-video-embed.toml``,
``.md-video-embed.yaml``, ``.md-video-embed.yml`` and
``.md-video-embed.json`` found in the working directory is used. Command line
flags override values from the file.

Exit codes: 0 on success, 1 for configuration errors, 2 for input/output
errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from md_video_embed.constants import (
    CONFIG_FILENAMES,
    EXIT_CONFIG_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_SUCCESS,
    YOUTUBE_MODES,
)
from md_video_embed.exceptions import ConfigFileError, InvalidConfigurationError
from md_video_embed.logging_utils import configure_logging
from md_video_embed.options.html import HtmlRendererOptions

logger = logging.getLogger(__name__)


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Return the first configuration file present in ``start_dir``.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to search, defaults to the current working directory

    Returns
    -------
    Path or None
        Path of the configuration file, or None if there is none

    """
    directory = start_dir or Path.cwd()
    for filename in CONFIG_FILENAMES:
        config_path = directory / filename
        if config_path.is_file():
            return config_path
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load provider options from a TOML, YAML or JSON file.

    The format is chosen from the file extension.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Provider options keyed by provider identifier

    Raises
    ------
    ConfigFileError
        If the file is missing, cannot be parsed, or is not a mapping

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigFileError(f"Configuration file does not exist: {config_path}", file_path=str(config_path))

    ext = config_path.suffix.lower()

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigFileError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", file_path=str(config_path)
            )
    except ConfigFileError:
        raise
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigFileError(
            f"Error reading config file {config_path}: {e}", file_path=str(config_path), original_error=e
        ) from e

    # An empty YAML document loads as None
    if config is None:
        return {}

    if not isinstance(config, dict):
        raise ConfigFileError(
            f"Configuration file {config_path} must contain a mapping, got {type(config).__name__}",
            file_path=str(config_path),
        )

    return config


def merge_cli_overrides(config: Dict[str, Any], parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Apply YouTube command line flags on top of file configuration.

    The input mapping is not modified.
    """
    merged = dict(config)
    overrides: Dict[str, Any] = {}

    if parsed_args.youtube_mode:
        overrides["mode"] = parsed_args.youtube_mode
    if parsed_args.use_default_css:
        overrides["use_default_css"] = True

    if overrides:
        youtube_options = merged.get("youtube", {})
        if not isinstance(youtube_options, dict):
            # Leave it to the provider to reject the malformed table
            return merged
        merged["youtube"] = {**youtube_options, **overrides}

    return merged


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``md-video-embed`` command."""
    from md_video_embed import __version__

    parser = argparse.ArgumentParser(
        prog="md-video-embed",
        description="Convert markdown to HTML, turning video-embed code blocks into privacy-respecting embeds.",
    )
    parser.add_argument("input", help="Markdown file to convert, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Write HTML to this file instead of stdout")
    parser.add_argument(
        "--config",
        help="Provider configuration file (.toml, .yaml, .yml or .json); "
        "defaults to .md-video-embed.* in the working directory",
    )
    parser.add_argument("--youtube-mode", choices=YOUTUBE_MODES, help="Default YouTube embedding mode")
    parser.add_argument(
        "--use-default-css",
        action="store_true",
        help="Inject the bundled default stylesheet for video embeds",
    )
    parser.add_argument("--standalone", action="store_true", help="Wrap the output in a complete HTML5 document")
    parser.add_argument("--title", default="Document", help="Document title used with --standalone")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Verbose logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    config_path: Optional[Path] = Path(parsed_args.config) if parsed_args.config else discover_config_file()
    config: Dict[str, Any] = {}
    if config_path is not None:
        logger.debug("Loading configuration from %s", config_path)
        config = load_config_file(config_path)
    return merge_cli_overrides(config, parsed_args)


def main(args: list[str] | None = None) -> int:
    """Execute the command line entry point.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    # Lazy import keeps --help and --version fast
    from md_video_embed.pipeline import attach

    try:
        plugin = attach(_resolve_config(parsed_args))
    except (ConfigFileError, InvalidConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        markdown = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    renderer_options = HtmlRendererOptions(standalone=parsed_args.standalone, title=parsed_args.title)
    html = plugin.to_html(markdown, renderer_options)

    if parsed_args.output:
        try:
            Path(parsed_args.output).write_text(html, encoding="utf-8")
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR
        logger.info("Wrote %s", parsed_args.output)
    else:
        sys.stdout.write(html)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
