from __future__ import annotations

import logging

from aozora2fmt.core import replace_hdrs, replace_page_breaks
from aozora2fmt.formats import get_output_format

MD = get_output_format("md")
TEX = get_output_format("tex")
PLAIN = get_output_format("plain")


def _heading_doc(annotation: str) -> str:
    return f"前文\n\n\n\n{annotation}\n\n\n\n本文"


def test_structured_medium_heading() -> None:
    doc = _heading_doc("［＃５字下げ］第一章［＃「第一章」は中見出し］")
    assert replace_hdrs(doc, MD) == "前文\n\n## 第一章\n\n本文"


def test_structured_levels_map_to_templates() -> None:
    assert replace_hdrs(_heading_doc("［＃３字下げ］上［＃「上」は大見出し］"), TEX) == (
        "前文\n\n\\chapter{上}\n\n本文"
    )
    assert replace_hdrs(_heading_doc("［＃７字下げ］一［＃「一」は小見出し］"), MD) == (
        "前文\n\n### 一\n\n本文"
    )


def test_structured_mode_disables_fallback() -> None:
    doc = _heading_doc("［＃５字下げ］第一章［＃「第一章」は中見出し］") + "\n\n\n\n独立行\n\n\n\n結び"
    result = replace_hdrs(doc, MD)
    assert "## 第一章" in result
    assert "\n\n\n\n独立行\n\n\n\n" in result
    assert "# 独立行" not in result


def test_unknown_level_passes_title_through(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="aozora2fmt")
    doc = _heading_doc("［＃５字下げ］序［＃「序」は窓大見出し］")
    assert replace_hdrs(doc, MD) == "前文\n\n序\n\n本文"
    assert len(caplog.records) == 1
    assert "bad hdr" in caplog.records[0].getMessage()


def test_fallback_treats_isolated_lines_as_headers() -> None:
    doc = "前文\n\n\n\n第一章\n\n\n\n本文"
    assert replace_hdrs(doc, MD) == "前文\n\n# 第一章\n\n本文"
    assert replace_hdrs(doc, PLAIN) == "前文\n\n第一章\n\n本文"


def test_document_without_headers_is_unchanged() -> None:
    doc = "一行目\n\n二行目\n\n三行目"
    assert replace_hdrs(doc, MD) == doc


def test_page_break_per_format() -> None:
    doc = "前\n\n［＃改ページ］\n\n後"
    assert replace_page_breaks(doc, MD) == "前\n\n<div style='break-after:always'></div>\n\n後"
    assert replace_page_breaks(doc, TEX) == "前\n\n\\newpage\n\n後"
    assert replace_page_breaks(doc, PLAIN) == "前\n\n\n\n後"
