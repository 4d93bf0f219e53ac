import json

import pytest

from nexus_studio.config.user_store import UserConfigStore
from nexus_studio.domain.exceptions import StorageError


def test_missing_file_loads_empty(tmp_path):
    store = UserConfigStore(tmp_path / "none" / "config.json")
    assert store.load() == {}


def test_set_persists_and_merges(tmp_path):
    path = tmp_path / "cfg" / "config.json"
    store = UserConfigStore(path)
    store.set("theme", "light")
    assert store.set("analytics", False) == {"theme": "light", "analytics": False}
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "light", "analytics": False}
    assert UserConfigStore(path).load()["theme"] == "light"
    assert [p.name for p in path.parent.iterdir()] == ["config.json"]


def test_reset_removes_file(tmp_path):
    store = UserConfigStore(tmp_path / "config.json")
    store.set("theme", "light")
    store.reset()
    assert not store.path.exists()
    assert store.load() == {}
    store.reset()


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_corrupt_file_raises(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError) as exc:
        UserConfigStore(path).load()
    assert exc.value.code == "STORE_READ_ERROR"
