from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .formats import OutputFormat
from .tables import ACCENT_MAP, JIS_MAP

logger = logging.getLogger(__name__)

FULLWIDTH_SPACE = "　"
SESAME_DOT = "﹅"
PAGE_BREAK_MARKER = "［＃改ページ］"
METADATA_DELIMITER = "\n" + "-" * 55 + "\n"

# Aozora texts are UTF-8 or, far more often, Shift_JIS.
_SOURCE_ENCODINGS = ("utf-8-sig", "cp932", "euc_jp")

_KANJI_CLASS = (
    "\u3400-\u4dbf"  # CJK Unified Ideographs Extension A
    "\u4e00-\u9fff"  # CJK Unified Ideographs
    "\uf900-\ufaff"  # CJK Compatibility Ideographs
    "\U00020000-\U0002fa1f"  # Extensions B-F, Compatibility Supplement
    "〆〻〇々ヶ"
)

_JIS_ANNOTATION_RE = re.compile(r"※［＃([^］]+)］")
_JIS_LOCATOR_RE = re.compile(r"第(\d)水準(\d)-(\d\d)-(\d\d)", re.ASCII)
_RUBY_RE = re.compile(f"｜?([{_KANJI_CLASS}]+)《([^》]+)》")
_BOUTEN_RE = re.compile(r"［＃「([^」]+)」に傍点］")
_ACCENT_SPAN_RE = re.compile(r"〔([^〕]+)〕")
# Longest tokens first so ligatures like "ae&" win over shorter tokens.
_ACCENT_TOKEN_RE = re.compile(
    "|".join(re.escape(token) for token in sorted(ACCENT_MAP, key=len, reverse=True))
)
_HEADING_RE = re.compile(r"\n\n［[^［]+［＃「([^」]+)」は([^」］\n]+)見出し］\n\n\n")
_BLANK_DELIMITED_LINE_RE = re.compile(r"\n\n\n([^\n]+)\n\n\n")


class MetadataBlockError(ValueError):
    """Raised when the text lacks the two separator lines around its notes block."""


def _heading_template(fmt: OutputFormat, level: str) -> str | None:
    return {"大": fmt.hdr, "中": fmt.shdr, "小": fmt.sshdr}.get(level)


def replace_jis(line: str) -> str:
    """Replace ``※［＃...第3水準1-14-76］`` references with the glyph they name."""
    result = line
    references = dict.fromkeys(match.group(0, 1) for match in _JIS_ANNOTATION_RE.finditer(line))
    for annotation, description in references:
        locator = _JIS_LOCATOR_RE.search(description)
        if locator is None:
            logger.debug("No JIS locator in annotation: %s", annotation)
            continue
        code = int("".join(locator.groups()))
        glyph = JIS_MAP.get(code)
        if glyph is None:
            logger.warning("JIS code not implemented: %d: %s", code, annotation)
            continue
        result = result.replace(annotation, glyph)
    return result


def replace_ruby(line: str, fmt: OutputFormat) -> str:
    """Render ``漢字《かんじ》`` ruby and ``［＃「X」に傍点］`` emphasis with ``fmt.ruby``."""
    result = line
    for match in _RUBY_RE.finditer(line):
        base, reading = match.groups()
        result = result.replace(match.group(0), fmt.render_ruby(base, reading))

    emphasized = result
    for match in _BOUTEN_RE.finditer(result):
        target = match.group(1)
        rendered = fmt.render_ruby(target, SESAME_DOT * len(target))
        emphasized = emphasized.replace(target + match.group(0), rendered)
    return emphasized


def decode_accents(text: str) -> str:
    return _ACCENT_TOKEN_RE.sub(lambda match: ACCENT_MAP[match.group(0)], text)


def replace_accents(line: str) -> str:
    """Unbracket ``〔...〕`` spans and decode the accent tokens inside them."""
    return _ACCENT_SPAN_RE.sub(lambda match: decode_accents(match.group(1)), line)


def replace_hdrs(text: str, fmt: OutputFormat) -> str:
    """
    Turn heading blocks of the joined document into formatted headers.

    Documents with ``［＃「X」は大見出し］`` style annotations map 大/中/小 to
    hdr/shdr/sshdr. Documents without any fall back to treating every line
    surrounded by blank lines as a top-level header.
    """
    headings = list(_HEADING_RE.finditer(text))
    if not headings:
        for match in _BLANK_DELIMITED_LINE_RE.finditer(text):
            replacement = "\n" + fmt.hdr % match.group(1) + "\n"
            text = text.replace(match.group(0), replacement)
        return text

    for match in headings:
        title, level = match.groups()
        template = _heading_template(fmt, level)
        if template is None:
            logger.warning("bad hdr: %r", match.group(0).strip("\n"))
            rendered = title
        else:
            rendered = template % title
        text = text.replace(match.group(0), rendered + "\n")
    return text


def replace_page_breaks(text: str, fmt: OutputFormat) -> str:
    return text.replace(PAGE_BREAK_MARKER, fmt.pb)


def trim_info(text: str) -> str:
    """Drop the notes block that sits between the first two separator lines."""
    parts = text.split(METADATA_DELIMITER, 2)
    if len(parts) < 3:
        found = len(parts) - 1
        raise MetadataBlockError(
            f"Expected a notes block enclosed by two separator lines of 55 hyphens, found {found}"
        )
    head, _notes, body = parts
    return head + body


def split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def convert_line(line: str, fmt: OutputFormat) -> str:
    line = line.strip(FULLWIDTH_SPACE)
    line = replace_jis(line)
    line = replace_ruby(line, fmt)
    return replace_accents(line)


def convert_lines(lines: Iterable[str], fmt: OutputFormat) -> list[str]:
    return [convert_line(line, fmt) for line in lines]


def convert_text(text: str, fmt: OutputFormat, *, debug: bool = False) -> str:
    """
    Convert a whole Aozora Bunko document.

    Lines are converted one by one and joined with blank lines before headers
    and page breaks are rendered. Unless ``debug`` is set the notes block
    between the two separator lines is removed, raising MetadataBlockError
    when the separators are missing.
    """
    out = "\n\n".join(convert_lines(split_lines(text), fmt))
    out = replace_hdrs(out, fmt)
    out = replace_page_breaks(out, fmt)
    if not debug:
        out = trim_info(out)
    return out


def read_source_text(path: Path | str) -> str:
    raw = Path(path).read_bytes()
    for encoding in _SOURCE_ENCODINGS:
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        logger.debug("Decoded %s as %s", path, encoding)
        return text
    logger.warning("Could not detect the encoding of %s; decoding as UTF-8 with replacements", path)
    return raw.decode("utf-8", errors="replace")


def convert_file(path: Path | str, fmt: OutputFormat, *, debug: bool = False) -> str:
    return convert_text(read_source_text(path), fmt, debug=debug)


__all__ = [
    "METADATA_DELIMITER",
    "MetadataBlockError",
    "PAGE_BREAK_MARKER",
    "SESAME_DOT",
    "convert_file",
    "convert_line",
    "convert_lines",
    "convert_text",
    "decode_accents",
    "read_source_text",
    "replace_accents",
    "replace_hdrs",
    "replace_jis",
    "replace_page_breaks",
    "replace_ruby",
    "split_lines",
    "trim_info",
]
