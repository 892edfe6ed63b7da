"""Shared fixtures for the explorer tests."""

from __future__ import annotations

import pandas as pd
import pytest

from jude_explorer.io import DatasetStore, prepare_subject_dataframe

VARIABLES = {
    "Latitude": "latitude",
    "Longitude": "longitude",
    "Perijove": "perijove",
    "Size": "size",
}


def _subject(i: int, **fields) -> dict:
    record = {
        "subject_ID": 1000 + i,
        "url": f"https://example.org/subjects/{1000 + i}.png",
    }
    record.update(fields)
    return record


@pytest.fixture
def three_records() -> pd.DataFrame:
    """Three subjects spanning the full perijove range, two of them vortices."""
    return prepare_subject_dataframe([
        _subject(0, perijove=13, is_vortex=True, latitude=10, longitude=100, size=3.5),
        _subject(1, perijove=20, is_vortex=False, latitude=-5, longitude=-20, size=1.0),
        _subject(2, perijove=36, is_vortex=True, latitude=60, longitude=45, size=7.25),
    ])


@pytest.fixture
def twenty_records() -> pd.DataFrame:
    """Twenty vortex subjects with perijoves 13..32."""
    return prepare_subject_dataframe([
        _subject(
            i,
            perijove=13 + i,
            is_vortex=True,
            latitude=-50 + 5 * i,
            longitude=-180 + 18 * i,
            size=float(i),
        )
        for i in range(20)
    ])


@pytest.fixture
def three_store(three_records) -> DatasetStore:
    return DatasetStore(subject_data=three_records, variables=dict(VARIABLES))


@pytest.fixture
def twenty_store(twenty_records) -> DatasetStore:
    return DatasetStore(subject_data=twenty_records, variables=dict(VARIABLES))
