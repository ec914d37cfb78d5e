import logging

from conftest import RecordingStore

from userapps.persistence import PersistWorker


def test_writes_reach_store_in_submit_order(tmp_path):
    store = RecordingStore(tmp_path / "u.json")
    worker = PersistWorker(store, "alice")

    worker.submit(["1"])
    worker.submit(["1", "2"])
    worker.submit(["2"])
    worker.flush()
    worker.stop()

    assert store.writes == [("alice", ["1"]), ("alice", ["1", "2"]), ("alice", ["2"])]
    assert store.read_ids("alice") == ["2"]


def test_submit_returns_before_write(tmp_path):
    store = RecordingStore(tmp_path / "u.json")
    worker = PersistWorker(store, "alice")

    worker.submit(["1"])  # starts the worker lazily
    worker.flush()

    assert worker._thread is not None and worker._thread.daemon
    worker.stop()


def test_failed_write_is_logged_not_raised(tmp_path, caplog):
    store = RecordingStore(tmp_path / "u.json", fail=True)
    worker = PersistWorker(store, "alice")

    with caplog.at_level(logging.ERROR, logger="userapps.persistence"):
        worker.submit(["1"])
        worker.flush()

    assert "Persisting pinned apps failed" in caplog.text

    # the worker survives and keeps writing
    store.fail = False
    worker.submit(["3"])
    worker.flush()
    worker.stop()
    assert store.writes == [("alice", ["3"])]
