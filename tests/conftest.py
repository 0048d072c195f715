"""Shared test fixtures."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from blobtrack.config import Settings
from blobtrack.db import connect
from blobtrack.repository import BlobRepository

API_URL = "https://api.example.test/v1/rollup/10/blobs"


def blob_payload(blob_id=42, **overrides):
    """A blob as the API returns it."""
    payload = {
        "id": blob_id,
        "commitment": "abc",
        "size": 100,
        "height": 5000,
        "time": "2024-01-01T00:00:00Z",
        "signer": "sgn1",
        "content_type": "application/octet",
        "namespace": {"namespace_id": "ns1"},
        "tx": {"id": 7, "height": 5000, "position": 1, "hash": "0xdead"},
    }
    payload.update(overrides)
    return payload


def make_response(status_code=200, json_body=None, reason="OK", content=None):
    """A response whose body is ``json_body`` serialized, or the raw ``content`` bytes."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.content = content if content is not None else json.dumps(json_body).encode()
    return response


def make_http_session(*responses):
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return session


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'blobs.db'}"


@pytest.fixture
def settings(db_url):
    return Settings(
        _env_file=None,
        api_key="test-key",
        api_url=API_URL,
        database_url=db_url,
        poll_interval=0.01,
        request_timeout=5,
    )


@pytest.fixture
def engine(settings):
    eng = connect(settings.sqlalchemy_url)
    yield eng
    eng.dispose()


@pytest.fixture
def repository(engine):
    repo = BlobRepository(engine)
    repo.ensure_schema()
    return repo
