"""
Tests for the CSV dataset seeder.
"""

from vibelist.core.database import Database
from vibelist.core.track_store import TrackStore
from vibelist.models.track import SOURCE_DATASET
from vibelist.seed import DATASET_FILENAME, main, seed


def _write_dataset(tmp_path, rows=3):
    path = tmp_path / "sample_music_data.csv"
    lines = ["Title,Artist,Duration,BPM,Energy"]
    lines += [f"Song {i},Artist {i},{200 + i},{100 + i},0.{i}" for i in range(rows)]
    path.write_text("\n".join(lines) + "\n")
    return path


class TestSeed:
    def test_seed_inserts_all_rows(self, tmp_path):
        db_path = tmp_path / "seed.db"
        assert seed(_write_dataset(tmp_path), db_path) == 3
        tracks = TrackStore(Database(db_path)).list_all(newest_first=False)
        assert [t.title for t in tracks] == ["Song 0", "Song 1", "Song 2"]
        assert all(t.source == SOURCE_DATASET for t in tracks)
        assert all(t.filename == DATASET_FILENAME for t in tracks)

    def test_main_missing_dataset(self, tmp_path):
        assert main([str(tmp_path / "nope.csv"), "--db", str(tmp_path / "x.db")]) == 1

    def test_main_ok(self, tmp_path):
        db_path = tmp_path / "main.db"
        assert main([str(_write_dataset(tmp_path, rows=2)), "--db", str(db_path)]) == 0
        assert TrackStore(Database(db_path)).count() == 2
