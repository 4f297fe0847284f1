from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DEFAULT_FORMAT = "plain"


class UnknownFormatError(ValueError):
    """Raised when an output format name is not in FORMATS."""


@dataclass(frozen=True, slots=True)
class OutputFormat:
    """Printf-style templates used to render converted markup."""

    name: str
    ruby: str  # base, reading
    hdr: str
    shdr: str
    sshdr: str
    pb: str  # page break text

    def render_ruby(self, base: str, reading: str) -> str:
        return self.ruby % (base, reading)


FORMATS: Mapping[str, OutputFormat] = MappingProxyType(
    {
        "tex": OutputFormat(
            name="tex",
            ruby="\\ruby{%s}{%s}",
            hdr="\\chapter{%s}",
            shdr="\\section*{%s}",
            sshdr="\\subsection*{%s}",
            pb="\\newpage",
        ),
        "md": OutputFormat(
            name="md",
            ruby="<ruby>%s<rp>《</rp><rt>%s</rt><rp>》</rp></ruby>",
            hdr="# %s",
            shdr="## %s",
            sshdr="### %s",
            pb="<div style='break-after:always'></div>",
        ),
        "plain": OutputFormat(
            name="plain",
            ruby="[%s:%s]",
            hdr="%s",
            shdr="%s",
            sshdr="%s",
            pb="",
        ),
    }
)


def get_output_format(name: str) -> OutputFormat:
    try:
        return FORMATS[name]
    except KeyError:
        choices = ", ".join(sorted(FORMATS))
        raise UnknownFormatError(f"Unknown output format {name!r} (choose from: {choices})") from None


__all__ = [
    "DEFAULT_FORMAT",
    "FORMATS",
    "OutputFormat",
    "UnknownFormatError",
    "get_output_format",
]
