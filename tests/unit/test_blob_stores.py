"""Contract tests shared by both blob store backends."""
import pytest

from infrastructure.storage import InMemoryBlobStore, SQLiteBlobStore, create_blob_store


@pytest.fixture(params=["memory", "sqlite"])
def blob_store(request, tmp_path):
    if request.param == "memory":
        store = InMemoryBlobStore()
    else:
        store = SQLiteBlobStore(tmp_path / "db" / "blobs.db")
    yield store
    store.close()


class TestBlobStore:
    @pytest.mark.asyncio
    async def test_write_then_read(self, blob_store):
        await blob_store.write_json("jobs/1.json", {"id": "1", "nested": {"ok": True}, "items": [1, 2]})

        assert await blob_store.read_json("jobs/1.json") == {"id": "1", "nested": {"ok": True}, "items": [1, 2]}

    @pytest.mark.asyncio
    async def test_missing_key_is_none(self, blob_store):
        assert await blob_store.read_json("jobs/missing.json") is None

    @pytest.mark.asyncio
    async def test_overwrite(self, blob_store):
        await blob_store.write_json("jobs/1.json", {"progress": 10})
        await blob_store.write_json("jobs/1.json", {"progress": 60})

        assert await blob_store.read_json("jobs/1.json") == {"progress": 60}

    @pytest.mark.asyncio
    async def test_list_keys_by_prefix(self, blob_store):
        for key in ("jobs/b.json", "jobs/a.json", "matches/a.json", "JOBS/c.json"):
            await blob_store.write_json(key, [])

        assert await blob_store.list_keys("jobs/") == ["jobs/a.json", "jobs/b.json"]
        assert await blob_store.list_keys("matches/") == ["matches/a.json"]
        assert await blob_store.list_keys("none/") == []

    @pytest.mark.asyncio
    async def test_prefix_wildcards_are_literal(self, blob_store):
        await blob_store.write_json("a_b/1.json", 1)
        await blob_store.write_json("axb/1.json", 2)
        await blob_store.write_json("100%/1.json", 3)
        await blob_store.write_json("1000/1.json", 4)

        assert await blob_store.list_keys("a_b/") == ["a_b/1.json"]
        assert await blob_store.list_keys("100%") == ["100%/1.json"]

    @pytest.mark.asyncio
    async def test_delete(self, blob_store):
        await blob_store.write_json("jobs/1.json", {})
        await blob_store.delete("jobs/1.json")
        await blob_store.delete("jobs/never-existed.json")

        assert await blob_store.read_json("jobs/1.json") is None
        assert await blob_store.list_keys("jobs/") == []

    @pytest.mark.asyncio
    async def test_returned_values_are_copies(self, blob_store):
        data = {"items": [1]}
        await blob_store.write_json("k", data)
        data["items"].append(2)

        first = await blob_store.read_json("k")
        first["items"].append(3)

        assert await blob_store.read_json("k") == {"items": [1]}


class TestSQLitePersistence:
    @pytest.mark.asyncio
    async def test_survives_reopen(self, tmp_path):
        path = tmp_path / "blobs.db"
        store = SQLiteBlobStore(path)
        await store.write_json("jobs/1.json", {"status": "complete"})
        store.close()

        reopened = SQLiteBlobStore(path)
        try:
            assert await reopened.read_json("jobs/1.json") == {"status": "complete"}
        finally:
            reopened.close()


class TestCreateBlobStore:
    def test_memory(self):
        assert create_blob_store("memory").backend == "memory"

    def test_sqlite(self, tmp_path):
        store = create_blob_store(" SQLite ", db_path=tmp_path / "x.db")
        try:
            assert store.backend == "sqlite"
            assert (tmp_path / "x.db").exists()
        finally:
            store.close()

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown data backend"):
            create_blob_store("redis")
