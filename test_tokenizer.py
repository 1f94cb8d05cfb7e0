# -*- coding: utf-8 -*-
import pytest

from objscene.errors import MalformedAttribute
from objscene.utils.tokenizer import read_components, split_directive, strip_line


def test_blank_and_comment_lines_are_skipped():
    assert split_directive("") is None
    assert split_directive("    ") is None
    assert split_directive("# just a comment") is None
    assert split_directive("   # indented comment  ") is None


def test_keyword_and_arguments():
    assert split_directive("v 1 2 3") == ("v", "1 2 3")
    assert split_directive("  usemtl  Wood  ") == ("usemtl", " Wood")
    assert split_directive("f 1 2 3 # tri") == ("f", "1 2 3")


def test_keyword_without_arguments():
    assert split_directive("o") == ("o", "")
    assert split_directive("g   # nothing") == ("g", "")


def test_strip_line_cuts_comment_after_trimming():
    assert strip_line("  vn 0 0 1#normal\n") == "vn 0 0 1"


def test_read_components_kinds():
    assert read_components("1 2.5 -3e2") == [1.0, 2.5, -300.0]
    assert read_components("4", int) == [4]
    assert read_components("a.png", str) == ["a.png"]
    assert read_components("") == []


def test_read_components_rejects_text():
    with pytest.raises(MalformedAttribute):
        read_components("1 two 3")
