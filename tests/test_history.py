from core.history import HistoryLog
from core.state import MemoryStore


def test_newest_first_and_capacity():
    log = HistoryLog(capacity=3)
    for i in range(5):
        log.record(f"{i} + 0", str(i))
    assert len(log) == 3
    assert [e.result for e in log.entries] == ["4", "3", "2"]
    assert log.latest().expression == "4 + 0"


def test_history_written_through_store():
    store = MemoryStore()
    log = HistoryLog(store=store)
    log.record("1 + 2", "3")
    saved = store.load()["history"]
    assert saved[0]["expr"] == "1 + 2"
    assert saved[0]["result"] == "3"

    restored = HistoryLog(store=store)
    restored.load()
    assert restored.entries[0].result == "3"

    log.clear()
    assert store.load()["history"] == []


def test_load_skips_malformed_rows():
    store = MemoryStore()
    store.save({"history": [{"expr": "2 × 2"}, {"expr": "1 + 1", "result": "2", "timestamp": "2024-01-01T00:00:00"}]})
    log = HistoryLog(store=store)
    log.load()
    assert [e.expression for e in log.entries] == ["1 + 1"]


def test_load_ignores_history_that_is_not_a_list():
    store = MemoryStore()
    store.save({"history": 5})
    log = HistoryLog(store=store)
    log.load()
    assert log.entries == []
