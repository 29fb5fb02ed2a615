import json
import os
from datetime import datetime, timezone

import pytest

from models import AnalysisResult
from detector.history_store import HistoryStore
from detector.phishing_detector import analyze_url


def test_empty_when_file_is_missing(history):
    assert history.load() == []
    assert not history.path.exists()


def test_newest_first(history):
    first = analyze_url("https://google.com")
    second = analyze_url("https://bit.ly/abc123")
    history.add(first)
    history.add(second)
    assert [r.id for r in history.load()] == [second.id, first.id]


def test_keeps_only_the_most_recent(tmp_path):
    store = HistoryStore(tmp_path / "h.json", limit=3)
    results = [analyze_url(f"https://site{i}.org") for i in range(5)]
    for r in results:
        store.add(r)
    assert [r.id for r in store.load()] == [r.id for r in reversed(results[2:])]


def test_persists_across_instances(history):
    result = analyze_url("http://goog1e.com/verify-urgent-account-suspend-confirm")
    history.add(result)

    reloaded = HistoryStore(history.path).load()
    assert reloaded == [result]
    assert isinstance(reloaded[0].timestamp, datetime)


def test_file_layout(history):
    history.add(analyze_url("https://bit.ly/abc123"))
    document = json.loads(history.path.read_text(encoding="utf-8"))
    entry = document["phishing-analyses"][0]
    assert entry["riskScore"] == 25
    assert entry["riskLevel"] == "LOW"
    assert entry["threats"][0]["type"] == "URL Shortener"


def test_clear_removes_file(history):
    history.add(analyze_url("https://google.com"))
    history.add(analyze_url("https://bit.ly/abc123"))
    assert history.clear() == 2
    assert history.load() == []
    assert not history.path.exists()


def test_clear_keeps_unrelated_keys(history):
    history.path.write_text(json.dumps({"settings": {"theme": "dark"}}), encoding="utf-8")
    history.add(analyze_url("https://google.com"))
    history.clear()
    assert json.loads(history.path.read_text(encoding="utf-8")) == {"settings": {"theme": "dark"}}


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "h.json"
    path.write_text("not json", encoding="utf-8")
    assert HistoryStore(path).load() == []


def test_invalid_records_are_treated_as_empty(tmp_path):
    path = tmp_path / "h.json"
    path.write_text(json.dumps({"phishing-analyses": [{"url": "x"}]}), encoding="utf-8")
    assert HistoryStore(path).load() == []


def test_export_json(history):
    result = analyze_url("https://bit.ly/abc123")
    history.add(result)
    exported = history.export_json()
    assert exported.startswith("[\n  {")
    data = json.loads(exported)
    assert AnalysisResult.model_validate(data[0]) == result


def test_export_filename():
    now = datetime(2026, 1, 2, 15, 30, tzinfo=timezone.utc)
    assert HistoryStore.export_filename(now) == "phishing_analysis_2026-01-02.json"


def test_failed_write_leaves_history_unchanged(history, monkeypatch):
    kept = analyze_url("https://google.com")
    history.add(kept)

    def fail(results):
        raise OSError("disk full")

    monkeypatch.setattr(history, "_write", fail)
    with pytest.raises(OSError):
        history.add(analyze_url("https://bit.ly/abc123"))
    assert [r.id for r in history.load()] == [kept.id]


def test_write_replaces_file_whole(history, monkeypatch):
    history.add(analyze_url("https://google.com"))
    before = history.path.read_text(encoding="utf-8")

    def fail(src, dst):
        raise OSError("crashed before swap")

    monkeypatch.setattr(os, "replace", fail)
    with pytest.raises(OSError):
        history.add(analyze_url("https://bit.ly/abc123"))
    assert history.path.read_text(encoding="utf-8") == before
    assert len(HistoryStore(history.path).load()) == 1
