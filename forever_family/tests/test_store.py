import json
import os
import tempfile
import threading
import unittest

from forever_family.store import InMemoryCollectionStore, JsonFileStore


class JsonFileStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.data_dir = os.path.join(self._tmp.name, "nested", "data")
        self.store = JsonFileStore(self.data_dir)

    def leftover_temp_files(self):
        return [name for name in os.listdir(self.data_dir) if name.endswith(".tmp")]

    def test_failed_write_keeps_previous_file(self):
        self.store.write("steps", [{"id": 1}])
        with self.assertRaises(TypeError):
            self.store.write("steps", [{"id": 2, "when": object()}])
        self.assertEqual(self.store.read("steps"), [{"id": 1}])
        self.assertEqual(self.leftover_temp_files(), [])

    def test_concurrent_writes_stay_whole(self):
        self.store.write("submissions", [])
        errors = []
        bad_reads = []

        def writer(worker):
            try:
                for i in range(100):
                    records = [{"id": n, "worker": worker} for n in range(i % 7 + 1)]
                    self.store.write("submissions", records)
            except Exception as exc:
                errors.append(exc)

        def reader():
            for _ in range(200):
                with open(self.store.path_for("submissions"), encoding="utf-8") as f:
                    try:
                        data = json.load(f)
                    except ValueError:
                        bad_reads.append(f.name)
                        continue
                if not isinstance(data, list):
                    bad_reads.append(f.name)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads.append(threading.Thread(target=reader))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(bad_reads, [])
        self.assertIsInstance(self.store.read("submissions"), list)
        self.assertEqual(self.leftover_temp_files(), [])

    def test_creates_data_dir(self):
        self.assertTrue(os.path.isdir(self.data_dir))

    def test_write_then_read_round_trip(self):
        records = [
            {"id": 1, "name": "Zoë", "tags": ["a", "b"], "outcome": None},
            {"id": 2, "nested": {"count": 3}},
        ]
        self.store.write("steps", records)
        self.assertEqual(self.store.read("steps"), records)

    def test_written_file_is_indented_json(self):
        self.store.write("steps", [{"id": 1}])
        with open(self.store.path_for("steps"), encoding="utf-8") as f:
            text = f.read()
        self.assertEqual(text, json.dumps([{"id": 1}], indent=2))
        self.assertEqual(self.leftover_temp_files(), [])

    def test_missing_file_reads_empty_and_is_created(self):
        self.assertEqual(self.store.read("submissions"), [])
        with open(self.store.path_for("submissions"), encoding="utf-8") as f:
            self.assertEqual(json.load(f), [])

    def test_corrupt_file_reads_empty_and_is_kept(self):
        path = self.store.path_for("referrals")
        with open(path, "w", encoding="utf-8") as f:
            f.write("[{broken")
        with self.assertLogs("forever_family.store", level="WARNING"):
            self.assertEqual(self.store.read("referrals"), [])
        with open(path, encoding="utf-8") as f:
            self.assertEqual(f.read(), "[{broken")

    def test_empty_file_reads_empty(self):
        open(self.store.path_for("steps"), "w").close()
        self.assertEqual(self.store.read("steps"), [])

    def test_non_array_reads_empty(self):
        with open(self.store.path_for("steps"), "w", encoding="utf-8") as f:
            json.dump({"id": 1}, f)
        self.assertEqual(self.store.read("steps"), [])


class InMemoryCollectionStoreTests(unittest.TestCase):
    def test_reads_are_copies(self):
        store = InMemoryCollectionStore()
        store.write("steps", [{"id": 1}])
        records = store.read("steps")
        records.append({"id": 2})
        records[0]["id"] = 99
        self.assertEqual(store.read("steps"), [{"id": 1}])

    def test_reset(self):
        store = InMemoryCollectionStore()
        store.write("steps", [{"id": 1}])
        store.reset()
        self.assertEqual(store.read("steps"), [])


if __name__ == "__main__":
    unittest.main()
