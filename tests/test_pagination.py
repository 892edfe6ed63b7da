"""Unit tests for image-panel paging."""

import pytest

from jude_explorer.explorer.pagination import PAGE_SIZE, Pager, page_count, paginate


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (16, 1), (17, 2), (20, 2), (33, 3)])
def test_page_count(n, expected):
    assert page_count(n) == expected


def test_page_count_rejects_bad_page_size():
    with pytest.raises(ValueError):
        page_count(5, page_size=0)


def test_twenty_records_two_pages(twenty_records):
    pager = Pager(total=len(twenty_records))
    assert pager.label == "1 / 2"
    assert len(paginate(twenty_records, 0)) == 16
    last = paginate(twenty_records, 1)
    assert last["subject_ID"].tolist() == [1016, 1017, 1018, 1019]


@pytest.mark.parametrize("n", [0, 1, 15, 16, 17, 50])
def test_pages_cover_sequence(n):
    items = list(range(n))
    pages = [paginate(items, p) for p in range(page_count(n))]
    assert [x for page in pages for x in page] == items
    assert all(len(page) <= PAGE_SIZE for page in pages)


def test_next_and_previous_are_clamped():
    pager = Pager(total=20)
    assert pager.previous().page == 0
    last = pager.next()
    assert last.page == 1
    assert last.next().page == 1
    assert last.label == "2 / 2"


def test_page_clamped_on_construction():
    assert Pager(total=20, page=7).page == 1
    assert Pager(total=20, page=-3).page == 0


def test_empty_panel():
    pager = Pager(total=0)
    assert pager.page == 0
    assert pager.label == "1 / 0"
    assert pager.bounds == (0, 0)
    assert paginate([], 3) == []
