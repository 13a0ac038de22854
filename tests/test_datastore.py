import pytest

from scriptsifter.models import AnalysisResult, ScanRecord, ScanStatus, SecretFinding, SourceType
from scriptsifter.services.datastore import DataStore


def _record(scan_id, **kwargs):
    result = AnalysisResult(
        secrets=(SecretFinding.of("aB3$fG7!kL9@zT2#"),),
        urls=("https://example.com/x",),
        domains=("example.com",),
        paths=("/x",),
    )
    defaults = dict(scan_id=scan_id, source="app.js", source_type=SourceType.FILE, size=42, result=result)
    defaults.update(kwargs)
    return ScanRecord(**defaults)


def test_save_and_load(tmp_path):
    store = DataStore(str(tmp_path))
    record = _record("20240101_000000_deadbeef")

    location = store.save_scan(record)

    assert (tmp_path / "20240101_000000_deadbeef" / DataStore.RECORD_FILE).exists()
    assert store.load_scan(record.scan_id) == record
    assert location.endswith("20240101_000000_deadbeef")


def test_download_files_are_written(tmp_path):
    store = DataStore(str(tmp_path))
    record = _record("scan_a")
    store.save_scan(record)

    text_path = store.get_results_path("scan_a", DataStore.TEXT_RESULTS_FILE)
    json_path = store.get_results_path("scan_a", DataStore.JSON_RESULTS_FILE)

    assert text_path.read_text(encoding="utf-8").startswith("Secrets (1):\n1. aB3$fG7!kL9@zT2#\n")
    assert '"urls"' in json_path.read_text(encoding="utf-8")


def test_failed_scan_has_no_result_files(tmp_path):
    store = DataStore(str(tmp_path))
    record = _record("scan_failed", status=ScanStatus.FAILED, error="Fetch error: 404 Not Found", result=None)
    store.save_scan(record)

    loaded = store.load_scan("scan_failed")
    assert not loaded.success
    assert loaded.error == "Fetch error: 404 Not Found"
    assert store.get_results_path("scan_failed", DataStore.TEXT_RESULTS_FILE) is None


def test_rejects_unsafe_ids_and_names(tmp_path):
    store = DataStore(str(tmp_path))
    store.save_scan(_record("scan_b"))

    assert store.load_scan("../scan_b") is None
    assert store.load_scan("scan_b\n") is None
    assert store.get_results_path("scan_b\n", DataStore.TEXT_RESULTS_FILE) is None
    assert store.load_scan("missing") is None
    assert store.get_results_path("scan_b", DataStore.RECORD_FILE) is None


def test_get_all_scans_newest_first(tmp_path):
    store = DataStore(str(tmp_path))
    store.save_scan(_record("old", analyzed_at="2024-01-01T00:00:00"))
    store.save_scan(_record("new", analyzed_at="2024-06-01T00:00:00"))
    (tmp_path / "stray").mkdir()

    assert [r.scan_id for r in store.get_all_scans()] == ["new", "old"]


def test_generate_scan_id_is_unique():
    assert DataStore.generate_scan_id() != DataStore.generate_scan_id()


def test_save_rejects_id_with_trailing_newline(tmp_path):
    store = DataStore(str(tmp_path))

    with pytest.raises(ValueError):
        store.save_scan(_record("scan_c\n"))

    assert list(tmp_path.iterdir()) == []
