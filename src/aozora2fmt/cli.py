from __future__ import annotations

import argparse
import logging
import sys
from importlib import metadata
from pathlib import Path

import tomllib
from rich.console import Console
from rich.logging import RichHandler

from .core import MetadataBlockError, convert_file
from .formats import DEFAULT_FORMAT, FORMATS, get_output_format

_LOG_FORMAT = "%(filename)s:%(lineno)d: %(message)s"


def _read_local_version() -> str | None:
    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    except IndexError:  # pragma: no cover
        return None
    try:
        with pyproject_path.open("rb") as fh:
            data = tomllib.load(fh)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return None
    return data.get("project", {}).get("version")


try:
    __version__ = metadata.version("aozora2fmt")
except metadata.PackageNotFoundError:
    __version__ = _read_local_version() or "0.0.0+unknown"


def _add_version_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"aozora2fmt {__version__}",
    )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="aozora2fmt",
        description="Aozora Bunko TXT → LaTeX, Markdown or plain text. Output goes to stdout.",
    )
    _add_version_flag(ap)
    ap.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Debug mode: keep the notes block between the separator lines and log verbosely.",
    )
    ap.add_argument(
        "-f",
        "--format",
        choices=list(FORMATS),
        default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT}).",
    )
    ap.add_argument(
        "files",
        nargs="*",
        metavar="file",
        help="Aozora Bunko text file to convert (UTF-8 or Shift_JIS).",
    )
    return ap


def configure_logging(debug: bool = False) -> None:
    logger = logging.getLogger("aozora2fmt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    console = Console(stderr=True)
    handler: logging.Handler
    if console.is_terminal:
        handler = RichHandler(console=console, show_time=False, show_path=True, markup=False)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.files) != 1:
        parser.print_help(sys.stderr)
        return 1

    configure_logging(args.debug)
    output_format = get_output_format(args.format)
    source = Path(args.files[0])
    try:
        out = convert_file(source, output_format, debug=args.debug)
    except OSError as exc:
        raise SystemExit(str(exc)) from exc
    except MetadataBlockError as exc:
        raise SystemExit(f"{source}: {exc}. Use -d to convert the full text.") from exc

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
