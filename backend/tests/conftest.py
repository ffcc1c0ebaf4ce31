"""Shared test fixtures."""

from __future__ import annotations

import io
import subprocess
from pathlib import Path

import pytest
from PIL import Image


# Minimal document from the end-to-end scenario: one line in a 2:1 landscape canvas
SIMPLE_LINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100pt" height="50pt">
  <g transform="scale(1,1)">
    <path d="M0 0 l 10 10"/>
  </g>
</svg>'''

# Shaped like real potrace output (--backend=svg --group --flat)
POTRACE_SVG = '''<?xml version="1.0" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 20010904//EN"
 "http://www.w3.org/TR/2001/REC-SVG-20010904/DTD/svg10.dtd">
<svg version="1.0" xmlns="http://www.w3.org/2000/svg"
 width="100.000000pt" height="50.000000pt" viewBox="0 0 100.000000 50.000000"
 preserveAspectRatio="xMidYMid meet">
<metadata>
Created by potrace 1.16, written by Peter Selinger 2001-2019
</metadata>
<g transform="translate(0.000000,50.000000) scale(0.100000,-0.100000)"
fill="#000000" stroke="none">
<path d="M100 100 c10 20 30 40 50 60 l100
0 z"/>
</g>
</svg>
'''

# Two groups, three paths, one of them move-to only
MULTI_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10pt" height="10pt">
  <g transform="scale(1,1)">
    <path d="M0 0 l 1 1"/>
    <path d="M5 5"/>
  </g>
  <g transform="translate(3,4) scale(2,2)">
    <path d="M0 0 c1 1 2 2 3 3"/>
  </g>
</svg>'''

NO_SCALE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="10pt" height="10pt">
  <g transform="translate(0,10)">
    <path d="M1 2 l 3 4"/>
  </g>
</svg>'''


def make_png(size: tuple[int, int] = (8, 8), transparent_pixel: tuple[int, int] | None = (0, 0)) -> bytes:
    """Black opaque square, optionally with one fully transparent pixel."""
    image = Image.new("RGBA", size, (0, 0, 0, 255))
    if transparent_pixel is not None:
        image.putpixel(transparent_pixel, (0, 0, 0, 0))
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


class FakePotrace:
    """Stands in for subprocess.run: records the command and writes a canned SVG."""

    def __init__(self, svg: str = POTRACE_SVG, returncode: int = 0, write_output: bool = True) -> None:
        self.svg = svg
        self.returncode = returncode
        self.write_output = write_output
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if self.write_output:
            output = next(a for a in cmd if a.startswith("--output="))
            Path(output.removeprefix("--output=")).write_text(self.svg)
        return subprocess.CompletedProcess(cmd, self.returncode, stdout="", stderr="boom" if self.returncode else "")


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def fake_potrace(monkeypatch) -> FakePotrace:
    fake = FakePotrace()
    monkeypatch.setattr("ma3scribble.imaging.trace.subprocess.run", fake)
    return fake
