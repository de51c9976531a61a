import unittest
import sys
import os
import json
import shutil

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bunny_maze.io.store import JsonFileStore, MemoryStore
from bunny_maze.core.score import WinCounter, WINS_KEY

class TestStore(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_memory_store(self):
        store = MemoryStore()
        self.assertEqual(store.get_int("missing", 7), 7)
        store.set_int("a", 3)
        self.assertEqual(store.get_int("a"), 3)

    def test_file_round_trip(self):
        path = "test_out/wins.json"
        store = JsonFileStore(path)
        self.assertEqual(store.get_int(WINS_KEY), 0)
        store.set_int(WINS_KEY, 4)

        # Fresh instance reads from disk
        self.assertEqual(JsonFileStore(path).get_int(WINS_KEY), 4)

        # No temp files left behind
        self.assertEqual(os.listdir("test_out"), ["wins.json"])

    def test_keeps_other_keys(self):
        path = "test_out/prefs.json"
        with open(path, "w") as f:
            json.dump({"other": 9}, f)

        JsonFileStore(path).set_int(WINS_KEY, 1)
        with open(path) as f:
            data = json.load(f)
        self.assertEqual(data, {"other": 9, WINS_KEY: 1})

    def test_creates_directory(self):
        path = "test_out/nested/dir/wins.json"
        JsonFileStore(path).set_int(WINS_KEY, 2)
        self.assertTrue(os.path.exists(path))

    def test_invalid_file(self):
        path = "test_out/broken.json"
        with open(path, "w") as f:
            f.write("{not json")
        with self.assertRaises(ValueError):
            JsonFileStore(path).get_int(WINS_KEY)

        with open(path, "w") as f:
            json.dump([1, 2, 3], f)
        with self.assertRaises(ValueError):
            JsonFileStore(path).get_int(WINS_KEY)

        with open(path, "w") as f:
            json.dump({WINS_KEY: "many"}, f)
        with self.assertRaises(ValueError):
            JsonFileStore(path).get_int(WINS_KEY)

class TestWinCounter(unittest.TestCase):
    def setUp(self):
        os.makedirs("test_out", exist_ok=True)

    def tearDown(self):
        shutil.rmtree("test_out", ignore_errors=True)

    def test_increment(self):
        store = MemoryStore({WINS_KEY: 5})
        counter = WinCounter(store)
        self.assertEqual(counter.value, 5)
        self.assertEqual(counter.increment(), 6)
        self.assertEqual(store.get_int(WINS_KEY), 6)

    def test_survives_restart(self):
        path = "test_out/wins.json"
        WinCounter(JsonFileStore(path)).increment()
        WinCounter(JsonFileStore(path)).increment()
        self.assertEqual(WinCounter(JsonFileStore(path)).value, 2)

if __name__ == '__main__':
    unittest.main()
