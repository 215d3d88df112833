import logging

from kids_keyboard.history_store import JsonHistoryStore


def test_save_and_load(tmp_path):
    store = JsonHistoryStore(tmp_path / "nested" / "history.json")
    store.save(["cat", "ice cream"])
    assert store.load() == ["cat", "ice cream"]
    assert not (tmp_path / "nested" / "history.tmp").exists()


def test_missing_file_is_empty(tmp_path):
    assert JsonHistoryStore(tmp_path / "none.json").load() == []


def test_corrupt_file_is_empty(tmp_path, caplog):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="kids_keyboard.history_store"):
        assert JsonHistoryStore(path).load() == []
    assert any("Could not read history" in r.message for r in caplog.records)


def test_plain_list_is_accepted(tmp_path):
    path = tmp_path / "history.json"
    path.write_text('["dog", 5, "fish"]', encoding="utf-8")
    assert JsonHistoryStore(path).load() == ["dog", "fish"]
