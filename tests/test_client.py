"""Tests for the backend client, with requests mocked out."""

from unittest.mock import MagicMock

import pytest
import requests

from jude_explorer.client import (
    DEFAULT_BACKEND_URL,
    EXPORT_FILENAME,
    EXPORT_MIME_TYPE,
    BackendClient,
    ExportError,
    default_backend_url,
)


def _response(payload: dict, status_error: Exception | None = None) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload
    if status_error is not None:
        resp.raise_for_status.side_effect = status_error
    return resp


def _client(**kwargs) -> tuple[BackendClient, MagicMock]:
    session = MagicMock()
    return BackendClient("http://backend.test/backend", session=session, **kwargs), session


def test_default_backend_url(monkeypatch):
    monkeypatch.delenv("JUDE_BACKEND_URL", raising=False)
    assert default_backend_url() == DEFAULT_BACKEND_URL
    monkeypatch.setenv("JUDE_BACKEND_URL", "http://elsewhere/api/")
    assert default_backend_url() == "http://elsewhere/api/"


def test_fetch_exploration_data():
    client, session = _client(timeout=5)
    session.get.return_value = _response({
        "subject_data": [
            {"subject_ID": 1, "perijove": 13, "is_vortex": True, "latitude": 10},
            {"subject_ID": 2, "perijove": 20, "is_vortex": False, "latitude": -5},
        ],
        "variables": {"Latitude": "latitude"},
    })

    store = client.fetch_exploration_data()

    assert len(store) == 2
    assert store.variables == {"Latitude": "latitude"}
    args, kwargs = session.get.call_args
    assert args[0] == "http://backend.test/backend/get-exploration-data/"
    assert kwargs["timeout"] == 5


def test_fetch_propagates_http_errors():
    client, session = _client()
    session.get.return_value = _response({}, requests.HTTPError("500 Server Error"))
    with pytest.raises(requests.HTTPError):
        client.fetch_exploration_data()


def test_create_export_success():
    client, session = _client()
    session.post.return_value = _response({"error": False, "filedata": "subject_ID\n1\n2\n"})

    export = client.create_export([1, 2])

    assert export.content == "subject_ID\n1\n2\n"
    assert export.filename == EXPORT_FILENAME == "subject_export.csv"
    assert export.mime_type == EXPORT_MIME_TYPE == "text/csv"
    args, kwargs = session.post.call_args
    assert args[0] == "http://backend.test/backend/create-export/"
    assert kwargs["json"] == {"subject_IDs": [1, 2]}


def test_create_export_error_flag():
    client, session = _client()
    session.post.return_value = _response({"error": True, "filedata": ""})
    with pytest.raises(ExportError):
        client.create_export([1])
