"""Test setup for doctrail."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from doctrail.schemas import Trail, TrailItem  # noqa: E402


@pytest.fixture
def tutorial_trail() -> Trail:
    """Intro, a Sub section with two pages, then End."""
    return (
        TrailItem(text="Intro", link="intro"),
        TrailItem(
            text="Sub",
            link="sub",
            subtrail=(
                TrailItem(text="S1", link="s1"),
                TrailItem(text="S2", link="s2"),
            ),
        ),
        TrailItem(text="End", link="end"),
    )


@pytest.fixture
def nested_trail() -> Trail:
    """A(subtrail=[B]), C."""
    return (
        TrailItem(text="A", link="a", subtrail=(TrailItem(text="B", link="b"),)),
        TrailItem(text="C", link="c"),
    )
