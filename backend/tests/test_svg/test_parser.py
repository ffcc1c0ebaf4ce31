"""Tests for SVG decoding."""

from __future__ import annotations

import pytest

from ma3scribble.errors import InputDecodeError
from ma3scribble.svg.parser import decode_svg
from tests.conftest import MULTI_GROUP_SVG, POTRACE_SVG, SIMPLE_LINE_SVG


def test_decode_simple():
    doc = decode_svg(SIMPLE_LINE_SVG)
    assert doc.width == 100.0
    assert doc.height == 50.0
    assert len(doc.groups) == 1
    assert doc.groups[0].transform == "scale(1,1)"
    assert doc.groups[0].paths[0].d == "M0 0 l 10 10"


def test_decode_potrace_output_bytes():
    doc = decode_svg(POTRACE_SVG.encode("utf-8"))
    assert (doc.width, doc.height) == (100.0, 50.0)
    assert doc.groups[0].transform == "translate(0.000000,50.000000) scale(0.100000,-0.100000)"
    assert doc.path_count == 1


def test_decode_keeps_group_and_path_order():
    doc = decode_svg(MULTI_GROUP_SVG)
    assert [len(g.paths) for g in doc.groups] == [2, 1]
    assert doc.groups[0].paths[1].d == "M5 5"


def test_ignores_elements_outside_groups():
    svg = '''<svg width="10pt" height="10pt">
      <path d="M0 0 l 1 1"/>
      <metadata>x</metadata>
      <g><path d="M1 1"/><circle r="1"/></g>
    </svg>'''
    doc = decode_svg(svg)
    assert len(doc.groups) == 1
    assert doc.path_count == 1
    assert doc.groups[0].transform == ""


def test_unitless_dimensions():
    doc = decode_svg('<svg width="20" height="30"></svg>')
    assert (doc.width, doc.height) == (20.0, 30.0)
    assert doc.groups == ()


@pytest.mark.parametrize(
    "svg",
    [
        "<not-svg",
        "",
        '<html width="10pt" height="10pt"></html>',
        '<svg height="10pt"></svg>',
        '<svg width="10pt"></svg>',
        '<svg width="tenpt" height="10pt"></svg>',
        '<svg width="0pt" height="10pt"></svg>',
        '<svg width="10pt" height="-5pt"></svg>',
        '<svg width="10px" height="10pt"></svg>',
    ],
)
def test_rejects_bad_input(svg):
    with pytest.raises(InputDecodeError):
        decode_svg(svg)
