import pytest
import sys
import os
import json
import threading
import time
from unittest.mock import MagicMock, patch

# Add the repository root and the function directory to the path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "serve_tart"))
import main
from tart.errors import IngestionParseError
from tart.region_index import ingest
from sample_dump import SAMPLE_DUMP


@pytest.fixture(autouse=True)
def fresh_index():
    main._index = None
    yield
    main._index = None


@pytest.fixture
def index():
    return ingest([SAMPLE_DUMP], "the south pacific")


def make_request(nation=None, path="/"):
    request = MagicMock()
    request.args = {"nation": nation} if nation else {}
    request.path = path
    return request


def test_tart_query_parameter(index):
    with patch.object(main, "load_index", return_value=index):
        body, status, headers = main.tart(make_request(nation="alpha"))

    assert status == 200
    assert headers["Content-Type"] == "application/json"
    assert json.loads(body) == ["beta"]


def test_tart_path_segment(index):
    with patch.object(main, "load_index", return_value=index):
        body, status, _ = main.tart(make_request(path="/tart/delta"))

    assert status == 200
    assert json.loads(body) == ["alpha", "beta", "gamma"]


def test_tart_ingests_once(index):
    with patch.object(main, "load_index", return_value=index) as mock_load:
        main.tart(make_request(nation="alpha"))
        main.tart(make_request(nation="beta"))

    mock_load.assert_called_once()


def test_tart_missing_nation_is_bad_request(index):
    with patch.object(main, "load_index", return_value=index):
        body, status = main.tart(make_request(path="/"))

    assert status == 400
    assert "Bad Request" in body


def test_tart_parse_failure_is_retried(index):
    with patch.object(main, "load_index", side_effect=IngestionParseError("bad dump")):
        _, status = main.tart(make_request(nation="alpha"))
    assert status == 500
    assert main._index is None

    with patch.object(main, "load_index", return_value=index):
        _, status, _ = main.tart(make_request(nation="alpha"))
    assert status == 200


def test_publish_tart_requires_bucket(monkeypatch):
    monkeypatch.delenv("BUCKET_NAME", raising=False)

    body, status = main.publish_tart(make_request())

    assert status == 500
    assert "Missing config" in body


def test_publish_tart(monkeypatch, index):
    monkeypatch.setenv("BUCKET_NAME", "test-bucket")
    monkeypatch.delenv("TART_PREFIX", raising=False)

    with patch.object(main, "load_index", return_value=index), \
         patch.object(main, "publish_pages", return_value=4) as mock_publish:
        body, status = main.publish_tart(make_request())

    assert status == 200
    assert "4 pages" in body
    mock_publish.assert_called_once_with(index, "test-bucket", "tart")


def test_tart_bare_prefix_is_bad_request(index, monkeypatch):
    monkeypatch.delenv("TART_PREFIX", raising=False)

    with patch.object(main, "load_index", return_value=index):
        _, status = main.tart(make_request(path="/tart"))

    assert status == 400


def test_tart_nation_without_prefix(index, monkeypatch):
    monkeypatch.delenv("TART_PREFIX", raising=False)

    with patch.object(main, "load_index", return_value=index):
        body, status, _ = main.tart(make_request(path="/alpha/"))

    assert status == 200
    assert json.loads(body) == ["beta"]


def test_tart_missing_nation_skips_ingestion():
    with patch.object(main, "load_index", side_effect=IngestionParseError("bad dump")) as mock_load:
        body, status = main.tart(make_request(path="/"))

    assert status == 400
    assert "Bad Request" in body
    mock_load.assert_not_called()


def test_concurrent_requests_ingest_once(index):
    def slow_load():
        time.sleep(0.2)
        return index

    results = []

    def call():
        results.append(main.tart(make_request(nation="alpha")))

    with patch.object(main, "load_index", side_effect=slow_load) as mock_load:
        threads = [threading.Thread(target=call) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert mock_load.call_count == 1
    assert [status for _, status, _ in results] == [200] * 4
