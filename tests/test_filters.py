"""Unit tests for perijove / vortex filtering."""

import pytest

from jude_explorer.explorer.filters import ExplorerView, FilterState, apply_filter, filter_mask
from jude_explorer.explorer.series import PlotSpec, build_series, extract_values
from jude_explorer.io import prepare_subject_dataframe
from jude_explorer.visualization.colors import DEFAULT_COLOR, ColorScheme


def _base(records, plot_type="hist", x="latitude", y=None) -> ExplorerView:
    spec = PlotSpec.from_form(plot_type, x, y)
    return ExplorerView(series=build_series(spec, records), records=records)


def test_full_range_keeps_everything(three_records):
    view = apply_filter(_base(three_records), FilterState(13, 36, vortex_only=False))
    assert len(view) == 3
    assert view.series.x == (10, -5, 60)
    assert view.series.bins.to_plotly() == {"start": -70, "end": 70, "size": 5}


def test_vortex_only(three_records):
    view = apply_filter(_base(three_records), FilterState(13, 36, vortex_only=True))
    assert view.records["subject_ID"].tolist() == [1000, 1002]
    assert view.series.x == (10, 60)


def test_range_excludes_lower_bound(three_records):
    view = apply_filter(_base(three_records), FilterState(14, 36, vortex_only=False))
    assert view.records["subject_ID"].tolist() == [1001, 1002]
    assert view.series.x == (-5, 60)


def test_bounds_are_inclusive(three_records):
    view = apply_filter(_base(three_records), FilterState(20, 20, vortex_only=False))
    assert view.records["perijove"].tolist() == [20]


def test_empty_result_is_valid(three_records):
    view = apply_filter(_base(three_records), FilterState(21, 35, vortex_only=True))
    assert len(view) == 0
    assert view.series.x == ()
    # histogram colours keep the fixed bin count
    assert len(view.series.colors) == 28


def test_inverted_range_is_empty(three_records):
    view = apply_filter(_base(three_records), FilterState(30, 14, vortex_only=False))
    assert len(view) == 0


def test_scatter_colors_sized_to_filtered_count(twenty_records):
    base = _base(twenty_records, "scatter", "latitude", "longitude")
    view = apply_filter(base, FilterState(13, 22, vortex_only=True))
    assert len(view) == 10
    assert view.series.colors == (DEFAULT_COLOR,) * 10
    assert len(view.series.y) == 10


def test_colors_reset_to_scheme_default(twenty_records):
    scheme = ColorScheme(default="#000000")
    base = _base(twenty_records, "scatter", "latitude", "longitude")
    view = apply_filter(base, FilterState(13, 14, vortex_only=False), scheme)
    assert view.series.colors == ("#000000", "#000000")


def test_alignment_invariant(twenty_records):
    """Series point i equals the values extracted from filtered record i."""
    base = _base(twenty_records, "scatter", "latitude", "longitude")
    view = apply_filter(base, FilterState(17, 29, vortex_only=True))
    assert view.series.x == extract_values(view.records, "latitude")
    assert view.series.y == extract_values(view.records, "longitude")
    assert view.records.index.tolist() == list(range(len(view)))


def test_filter_is_idempotent(three_records):
    base = _base(three_records)
    state = FilterState(14, 36, vortex_only=True)
    first = apply_filter(base, state)
    second = apply_filter(base, state)
    assert first.series == second.series
    assert first.records.equals(second.records)


@pytest.mark.parametrize(
    "wide, narrow",
    [
        (FilterState(13, 36, False), FilterState(15, 30, False)),
        (FilterState(13, 36, False), FilterState(13, 36, True)),
        (FilterState(15, 30, False), FilterState(20, 25, True)),
    ],
)
def test_narrowing_never_grows_result(twenty_records, wide, narrow):
    base = _base(twenty_records, "scatter", "latitude", "longitude")
    assert len(apply_filter(base, narrow)) <= len(apply_filter(base, wide))


def test_filters_do_not_stack(three_records):
    """Each edit re-filters the base view, so widening again restores rows."""
    base = _base(three_records)
    apply_filter(base, FilterState(30, 36, vortex_only=False))
    view = apply_filter(base, FilterState(13, 36, vortex_only=False))
    assert len(view) == 3


def test_base_view_untouched(three_records):
    base = _base(three_records)
    apply_filter(base, FilterState(30, 36, vortex_only=True))
    assert base.series.x == (10, -5, 60)
    assert len(base.records) == 3


def test_missing_perijove_or_flag_never_passes():
    records = prepare_subject_dataframe([
        {"subject_ID": 1, "perijove": 20, "is_vortex": True},
        {"subject_ID": 2, "is_vortex": True},
        {"subject_ID": 3, "perijove": 20},
    ])
    assert filter_mask(records, FilterState(13, 36, vortex_only=False)).tolist() == [True, False, True]
    assert filter_mask(records, FilterState(13, 36, vortex_only=True)).tolist() == [True, False, False]


def test_view_rejects_misaligned_series(three_records):
    series = build_series(PlotSpec.from_form("hist", "latitude"), three_records)
    with pytest.raises(ValueError):
        ExplorerView(series=series, records=three_records.iloc[:2])
