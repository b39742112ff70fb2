import threading

import pytest

from swarmlet.memory import DummyMemory, Memory


def test_set_then_get():
    memory = DummyMemory()
    memory.set("k", {"a": 1})
    assert memory.get("k") == {"a": 1}


def test_set_overwrites():
    memory = DummyMemory()
    memory.set("k", "one")
    memory.set("k", "two")
    assert memory.get("k") == "two"


def test_get_missing_raises():
    memory = DummyMemory()
    with pytest.raises(KeyError, match="key 'nope' not found in memory"):
        memory.get("nope")


def test_append_to_missing_key_stores_value():
    memory = DummyMemory()
    memory.append("k", 42)
    assert memory.get("k") == 42


def test_append_joins_strings_with_newline():
    memory = DummyMemory()
    memory.set("k", "first")
    memory.append("k", "second")
    memory.append("k", 3)
    assert memory.get("k") == "first\nsecond\n3"


def test_append_formats_booleans():
    memory = DummyMemory()
    memory.set("k", "flag")
    memory.append("k", True)
    assert memory.get("k") == "flag\ntrue"


def test_append_replaces_non_string():
    memory = DummyMemory()
    memory.set("k", 7)
    memory.append("k", "text")
    assert memory.get("k") == "text"


def test_memory_is_abstract():
    with pytest.raises(TypeError):
        Memory()


def test_concurrent_appends_keep_every_line():
    memory = DummyMemory()
    memory.set("log", "start")

    def worker(n):
        for i in range(50):
            memory.append("log", f"{n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = memory.get("log").split("\n")
    assert len(lines) == 1 + 4 * 50
    assert lines[0] == "start"