"""
Unit tests for upload storage and feature derivation from probed audio.
"""

import re

from vibelist.core import audio_probe
from vibelist.core.audio_probe import AudioTags, probe_audio
from vibelist.core.features import derive
from vibelist.core.uploads import discard_upload, import_upload, unique_filename
from vibelist.models.track import SOURCE_UPLOAD


class TestUniqueFilename:
    def test_format_keeps_extension(self):
        name = unique_filename("My Song.MP3")
        assert re.fullmatch(r"\d+-\d+\.MP3", name)

    def test_no_extension(self):
        assert re.fullmatch(r"\d+-\d+", unique_filename("noext"))


class TestImportUpload:
    def test_tags_and_derived_features(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            audio_probe,
            "probe_audio",
            lambda path: AudioTags(duration=200.0, title="Tagged", artist="Someone", album=None),
        )
        track = import_upload(tmp_path, "song.mp3", b"ID3 bytes")
        expected = derive(200.0)
        assert track.title == "Tagged"
        assert track.artist == "Someone"
        assert track.album == "Unknown Album"
        assert track.duration == 200.0
        assert track.energy == expected.energy
        assert track.valence == expected.valence
        assert track.danceability == expected.danceability
        assert track.bpm == expected.bpm
        assert track.source == SOURCE_UPLOAD
        assert (tmp_path / track.filename).read_bytes() == b"ID3 bytes"
        assert track.path == str(tmp_path / track.filename)

    def test_tag_bpm_used(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            audio_probe, "probe_audio", lambda path: AudioTags(duration=200.0, bpm=140.0)
        )
        track = import_upload(tmp_path, "song.flac", b"fLaC")
        assert track.bpm == 140.0
        assert track.title == "song"

    def test_unreadable_file_gets_fixed_defaults(self, tmp_path):
        track = import_upload(tmp_path, "notes.txt", b"definitely not audio")
        assert track.duration == 180.0
        assert track.bpm == 100.0
        assert track.energy == 0.5
        assert track.valence == 0.5
        assert track.title == "notes"
        assert track.artist == "Unknown Artist"

    def test_identical_audio_identical_features(self, tmp_path, monkeypatch):
        monkeypatch.setattr(audio_probe, "probe_audio", lambda path: AudioTags(duration=245.3))
        a = import_upload(tmp_path, "a.ogg", b"same")
        b = import_upload(tmp_path, "a.ogg", b"same")
        assert a.id != b.id
        assert a.filename != b.filename
        assert (a.energy, a.valence, a.danceability, a.bpm) == (
            b.energy,
            b.valence,
            b.danceability,
            b.bpm,
        )


class TestDiscardUpload:
    def test_removes_stored_file(self, tmp_path):
        track = import_upload(tmp_path, "gone.mp3", b"bytes")
        assert track.is_local
        discard_upload(track)
        assert not (tmp_path / track.filename).exists()

    def test_ignores_tracks_without_local_audio(self, tmp_path, track_factory):
        keep = tmp_path / "keep.mp3"
        keep.write_bytes(b"x")
        external = track_factory()
        assert not external.is_local
        discard_upload(external)
        assert keep.exists()


class TestProbeAudio:
    def test_garbage_returns_none(self, tmp_path):
        path = tmp_path / "garbage.bin"
        path.write_bytes(b"\x00\x01\x02 nothing here")
        assert probe_audio(str(path)) is None

    def test_missing_file_returns_none(self, tmp_path):
        assert probe_audio(str(tmp_path / "missing.mp3")) is None
