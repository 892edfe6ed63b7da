"""HTTP client for the JuDE backend.

Two endpoints are used:

* ``GET  {base}/get-exploration-data/`` returns the subject records and
  the variable catalogue.
* ``POST {base}/create-export/`` takes ``{"subject_IDs": [...]}`` and
  returns ``{"error": bool, "filedata": str}`` with CSV content.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import requests

from .io import DatasetStore
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_BACKEND_URL = "http://127.0.0.1:8000/backend/"

EXPORT_FILENAME = "subject_export.csv"
EXPORT_MIME_TYPE = "text/csv"

_JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


def default_backend_url() -> str:
    """``JUDE_BACKEND_URL`` if set, else :data:`DEFAULT_BACKEND_URL`."""
    return os.environ.get("JUDE_BACKEND_URL") or DEFAULT_BACKEND_URL


class ExportError(RuntimeError):
    """The backend reported ``error: true`` for an export request."""


@dataclass(frozen=True)
class ExportFile:
    content: str
    filename: str = EXPORT_FILENAME
    mime_type: str = EXPORT_MIME_TYPE


class BackendClient:
    """Thin wrapper over a :class:`requests.Session`.

    Parameters
    ----------
    base_url : str, optional
        Backend base path; defaults to :func:`default_backend_url`.
    session : requests.Session, optional
        Injected for tests; a new session is created otherwise.
    timeout : float, optional
        Timeout for the dataset fetch. Export requests are sent without one.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = (base_url or default_backend_url()).rstrip("/") + "/"
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")

    def fetch_exploration_data(self) -> DatasetStore:
        """Fetch the subject records and variable catalogue.

        Raises
        ------
        requests.HTTPError
            If the backend answers with an error status.
        """
        url = self._url("get-exploration-data/")
        logger.info("Fetching exploration data from %s", url)
        resp = self.session.get(url, headers=_JSON_HEADERS, timeout=self.timeout)
        resp.raise_for_status()
        return DatasetStore.from_payload(resp.json())

    def create_export(self, subject_ids: Iterable[Any]) -> ExportFile:
        """Ask the backend for a CSV export of *subject_ids*.

        Raises
        ------
        ExportError
            If the response carries ``error: true``.
        requests.HTTPError
            If the backend answers with an error status.
        """
        ids = list(subject_ids)
        resp = self.session.post(
            self._url("create-export/"),
            json={"subject_IDs": ids},
            headers=_JSON_HEADERS,
        )
        resp.raise_for_status()
        data = resp.json()
        if data.get("error"):
            raise ExportError(f"Backend failed to export {len(ids)} subjects")
        logger.info("Exported %s subjects", len(ids))
        return ExportFile(content=data.get("filedata") or "")
