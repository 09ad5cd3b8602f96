import pytest

from cooknote.infra.storage import JsonFileStore, MemoryStore
from cooknote.utilities.constants import RECIPES_KEY, FAMILY_KEY


@pytest.mark.asyncio
async def test_file_store_round_trip(tmp_path):
    store = JsonFileStore(tmp_path)
    assert await store.get(RECIPES_KEY) is None
    await store.set(RECIPES_KEY, "[{\"name\": \"番茄\"}]".encode("utf-8"))
    assert await store.get(RECIPES_KEY) == "[{\"name\": \"番茄\"}]".encode("utf-8")
    assert (tmp_path / "recipes.json").exists()


@pytest.mark.asyncio
async def test_file_store_keys_are_separate_files(tmp_path):
    store = JsonFileStore(tmp_path)
    await store.set(RECIPES_KEY, b"[1]")
    await store.set(FAMILY_KEY, b"[2]")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["family.json", "recipes.json"]


@pytest.mark.asyncio
async def test_file_store_overwrite_leaves_no_temp_files(tmp_path):
    store = JsonFileStore(tmp_path / "nested")
    await store.set(RECIPES_KEY, b"[1]")
    await store.set(RECIPES_KEY, b"[1, 2]")
    assert await store.get(RECIPES_KEY) == b"[1, 2]"
    assert [p.name for p in (tmp_path / "nested").iterdir()] == ["recipes.json"]


@pytest.mark.asyncio
async def test_memory_store_counts_writes():
    store = MemoryStore()
    await store.set("k", b"v")
    assert store.writes == 1
    assert await store.get("k") == b"v"
