"""Tests for the marker colour scheme."""

import pytest

from jude_explorer.visualization.colors import (
    DEFAULT_COLOR,
    HIGHLIGHT_COLOR,
    ColorScheme,
    normalize_color,
)


def test_normalize_named_color():
    assert normalize_color("dodgerblue") == "#1e90ff"
    assert normalize_color("#2E86C1") == "#2e86c1"


def test_normalize_rejects_unknown():
    with pytest.raises(ValueError):
        normalize_color("not-a-colour")


def test_scheme_defaults():
    scheme = ColorScheme()
    assert (scheme.default, scheme.highlight) == (DEFAULT_COLOR, HIGHLIGHT_COLOR)
    assert scheme.fill(3) == (DEFAULT_COLOR,) * 3
    assert scheme.fill(0) == ()


def test_highlighted_ignores_out_of_range():
    scheme = ColorScheme()
    colors = scheme.highlighted(3, [1, 5, -1])
    assert colors == (DEFAULT_COLOR, HIGHLIGHT_COLOR, DEFAULT_COLOR)
