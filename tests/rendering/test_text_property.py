# topmark:header:start
#
#   project      : GenBelt
#   file         : test_text_property.py
#   file_relpath : tests/rendering/test_text_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for indentation and comment wrapping."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from genbelt.rendering.text import TextFormatter, make_comment

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_lines = st.lists(st.text(alphabet=st.characters(blacklist_characters="\n\r"), max_size=20))


@settings(max_examples=200, deadline=None)
@given(lines=_lines, unit=st.integers(min_value=0, max_value=8), level=st.integers(0, 4))
def test_indent_prefixes_content_lines_and_empties_blank_ones(
    lines: list[str], unit: int, level: int
) -> None:
    """Each output line is either empty or the prefixed input line."""
    result = TextFormatter(indentation=unit).indent(lines, level)
    expected_lines = lines if lines else [""]
    out_lines = result.split("\n")

    assert len(out_lines) == len(expected_lines)
    prefix = " " * (unit * level)
    for original, rendered in zip(expected_lines, out_lines):
        if original.strip():
            assert rendered == prefix + original
        else:
            assert rendered == ""


@settings(max_examples=200, deadline=None)
@given(lines=st.lists(st.text(alphabet="abc \t", max_size=5), min_size=2, max_size=6))
def test_multiline_comment_has_one_line_per_input_line(lines: list[str]) -> None:
    """A block comment has the opening and closing line plus one line per input line."""
    comment = make_comment(lines)
    body = comment.split("\n")
    assert body[0] == "/**"
    assert body[-2:] == [" */", ""]
    assert len(body) == len(lines) + 3
