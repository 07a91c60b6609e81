"""Tests for I/O adapters."""

import json
import logging

import pytest
import requests
import responses

from eventfinder.adapters import (
    ConsoleNotifier,
    EventFetchError,
    HttpEventSource,
    JsonFileEventSource,
    LoggingNotifier,
    StaticAuthContext,
)
from eventfinder.config import Config

API = "https://api.example.com/api"


class TestHttpEventSource:
    def test_requires_base_url(self):
        with pytest.raises(ValueError):
            HttpEventSource("")

    def test_strips_trailing_slash(self):
        assert HttpEventSource(API + "/").base_url == API

    def test_from_config(self):
        config = Config(api_base_url=API, api_token="tok", request_timeout=3.5)
        source = HttpEventSource.from_config(config)
        assert source.base_url == API
        assert source.token == "tok"
        assert source.timeout == 3.5

    @responses.activate
    def test_fetch_list(self):
        responses.add(responses.GET, f"{API}/events", json=[{"_id": "1"}], status=200)
        assert HttpEventSource(API).fetch_events() == [{"_id": "1"}]

    @responses.activate
    def test_fetch_envelope(self):
        responses.add(responses.GET, f"{API}/events", json={"events": [{"_id": "1"}]}, status=200)
        assert HttpEventSource(API).fetch_events() == [{"_id": "1"}]

    @responses.activate
    def test_null_body_is_empty(self):
        responses.add(responses.GET, f"{API}/events", body="null", status=200)
        assert HttpEventSource(API).fetch_events() == []

    @responses.activate
    def test_sends_bearer_token(self):
        responses.add(responses.GET, f"{API}/events", json=[], status=200)
        HttpEventSource(API, token="secret").fetch_events()
        assert responses.calls[0].request.headers["Authorization"] == "Bearer secret"

    @responses.activate
    def test_no_token_no_header(self):
        responses.add(responses.GET, f"{API}/events", json=[], status=200)
        HttpEventSource(API).fetch_events()
        assert "Authorization" not in responses.calls[0].request.headers

    @responses.activate
    def test_http_error(self):
        responses.add(responses.GET, f"{API}/events", json={"error": "nope"}, status=500)
        with pytest.raises(EventFetchError, match="failed"):
            HttpEventSource(API).fetch_events()

    @responses.activate
    def test_connection_error(self):
        responses.add(responses.GET, f"{API}/events", body=requests.ConnectionError("down"))
        with pytest.raises(EventFetchError):
            HttpEventSource(API).fetch_events()

    @responses.activate
    def test_invalid_json(self):
        responses.add(responses.GET, f"{API}/events", body="<html>", status=200)
        with pytest.raises(EventFetchError):
            HttpEventSource(API).fetch_events()

    @responses.activate
    def test_unexpected_payload(self):
        responses.add(responses.GET, f"{API}/events", json="hello", status=200)
        with pytest.raises(EventFetchError, match="Unexpected payload"):
            HttpEventSource(API).fetch_events()


class TestJsonFileEventSource:
    def test_reads_list(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps([{"_id": "1"}, None]))
        assert JsonFileEventSource(path).fetch_events() == [{"_id": "1"}, None]

    def test_reads_envelope(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": [{"_id": "1"}]}))
        assert JsonFileEventSource(path).fetch_events() == [{"_id": "1"}]

    def test_missing_file(self, tmp_path):
        with pytest.raises(EventFetchError, match="Cannot read"):
            JsonFileEventSource(tmp_path / "nope.json").fetch_events()

    def test_bad_json(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text("{not json")
        with pytest.raises(EventFetchError, match="Invalid JSON"):
            JsonFileEventSource(path).fetch_events()

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": 5}))
        with pytest.raises(EventFetchError):
            JsonFileEventSource(path).fetch_events()


class TestNotifiers:
    def test_logging_notifier(self, caplog):
        with caplog.at_level(logging.ERROR):
            LoggingNotifier().notify_error("Failed to fetch events")
        assert "Failed to fetch events" in caplog.text

    def test_console_notifier(self, capsys):
        ConsoleNotifier().notify_error("Failed to fetch events")
        assert "Error: Failed to fetch events" in capsys.readouterr().err


class TestStaticAuthContext:
    def test_current_user(self):
        assert StaticAuthContext("alice").current_user() == "alice"
        assert StaticAuthContext().current_user() is None
