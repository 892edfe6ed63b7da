"""Dataset loading for the explorer.

Handles the ``{"subject_data": [...], "variables": {...}}`` payload
served by the backend (or stored on disk as JSON) and turns it into the
immutable :class:`DatasetStore` the pipeline reads from.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

import pandas as pd

from .utils.logging import get_logger

logger = get_logger(__name__)

#: Fields every subject record is expected to carry.
SUBJECT_COLUMNS = ("subject_ID", "url", "latitude", "longitude", "perijove", "is_vortex")


def prepare_subject_dataframe(subject_data: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Build the record table from a list of subject dicts.

    Row order follows *subject_data*. Expected fields that are absent are
    added as missing values rather than rejected, so downstream binning
    and filtering see them as ``None``.

    Parameters
    ----------
    subject_data : sequence of dict
        One mapping per subject.

    Returns
    -------
    pd.DataFrame
        A fresh frame with a ``RangeIndex``.

    Raises
    ------
    ValueError
        If two records share a ``subject_ID``.
    """
    df = pd.DataFrame.from_records(list(subject_data))

    for col in SUBJECT_COLUMNS:
        if col not in df.columns:
            df[col] = None

    ids = df["subject_ID"].dropna()
    duplicated = ids[ids.duplicated()]
    if not duplicated.empty:
        raise ValueError(
            f"Duplicate subject_ID values in dataset: {sorted(set(duplicated.tolist()))[:10]}"
        )

    return df.reset_index(drop=True)


@dataclass(frozen=True, eq=False)
class DatasetStore:
    """Subject records plus the variable catalogue, fixed after load."""

    subject_data: pd.DataFrame
    variables: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DatasetStore":
        """Create a store from the backend's exploration-data payload."""
        subject_data = prepare_subject_dataframe(payload.get("subject_data") or [])
        variables = dict(payload.get("variables") or {})
        logger.info(
            "Loaded %s subjects and %s plot variables",
            len(subject_data), len(variables),
        )
        return cls(subject_data=subject_data, variables=variables)

    @classmethod
    def empty(cls) -> "DatasetStore":
        return cls.from_payload({})

    def __len__(self) -> int:
        return len(self.subject_data)

    def variable_options(self) -> list[dict[str, str]]:
        """Dropdown options (display key as label, field name as value)."""
        return [{"label": key, "value": name} for key, name in self.variables.items()]


def load_exploration_data(path: str) -> DatasetStore:
    """Read an exploration-data JSON file from disk.

    Parameters
    ----------
    path : str
        File holding the same JSON document the backend serves.
    """
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    return DatasetStore.from_payload(payload)
