from __future__ import annotations

import pytest

from aozora2fmt.formats import FORMATS, UnknownFormatError, get_output_format


def test_known_formats_are_closed_set() -> None:
    assert set(FORMATS) == {"tex", "md", "plain"}


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("plain", "[経済:けいざい]"),
        ("md", "<ruby>経済<rp>《</rp><rt>けいざい</rt><rp>》</rp></ruby>"),
        ("tex", "\\ruby{経済}{けいざい}"),
    ],
)
def test_render_ruby_per_format(name: str, expected: str) -> None:
    assert get_output_format(name).render_ruby("経済", "けいざい") == expected


def test_header_templates_for_tex() -> None:
    fmt = get_output_format("tex")
    assert fmt.hdr % "序" == "\\chapter{序}"
    assert fmt.shdr % "序" == "\\section*{序}"
    assert fmt.sshdr % "序" == "\\subsection*{序}"
    assert fmt.pb == "\\newpage"


def test_plain_page_break_is_empty() -> None:
    assert get_output_format("plain").pb == ""


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(UnknownFormatError) as excinfo:
        get_output_format("html")
    message = str(excinfo.value)
    assert "html" in message
    assert "md, plain, tex" in message
