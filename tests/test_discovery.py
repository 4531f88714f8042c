"""Tests for candidate discovery."""

from pathlib import Path

from seed_collector.discovery import SUPPORTED_EXTENSIONS, discover_candidates, is_candidate


class TestIsCandidate:
    def test_supported_extensions(self):
        for name in ("a.png", "b.jpg", "c.jpeg", "d.bmp"):
            assert is_candidate(Path(name))

    def test_case_insensitive(self):
        assert is_candidate(Path("IMAGE.PNG"))
        assert is_candidate(Path("image.png"))
        assert is_candidate(Path("Photo.JpEg"))

    def test_rejects_other_types(self):
        for name in ("d.gif", "e.txt", "f.webp", "g.tiff", "png", "archive.png.zip"):
            assert not is_candidate(Path(name))

    def test_extension_set_is_exhaustive(self):
        assert SUPPORTED_EXTENSIONS == {".png", ".jpg", ".jpeg", ".bmp"}


class TestDiscoverCandidates:
    def test_empty_folder(self, tmp_path):
        assert discover_candidates(tmp_path) == []

    def test_only_non_matching_files(self, tmp_path):
        (tmp_path / "d.gif").write_bytes(b"GIF89a")
        (tmp_path / "e.txt").write_text("Seed: 1")
        assert discover_candidates(tmp_path) == []

    def test_recursive_and_sorted(self, tmp_path):
        nested = tmp_path / "batch" / "hires"
        nested.mkdir(parents=True)
        for path in (tmp_path / "b.jpg", tmp_path / "a.png", nested / "c.BMP", tmp_path / "batch" / "x.jpeg"):
            path.write_bytes(b"")
        (tmp_path / "notes.txt").write_text("ignored")

        found = discover_candidates(tmp_path)

        assert found == sorted(found)
        assert {p.relative_to(tmp_path).as_posix() for p in found} == {
            "a.png",
            "b.jpg",
            "batch/x.jpeg",
            "batch/hires/c.BMP",
        }

    def test_both_cases_are_found(self, tmp_path):
        (tmp_path / "IMAGE.PNG").write_bytes(b"")
        (tmp_path / "image.png").write_bytes(b"")
        names = [p.name for p in discover_candidates(tmp_path)]
        assert sorted(names) == ["IMAGE.PNG", "image.png"]

    def test_directories_named_like_images_are_skipped(self, tmp_path):
        (tmp_path / "folder.png").mkdir()
        assert discover_candidates(tmp_path) == []

    def test_stable_between_calls(self, tmp_path):
        for name in ("z.png", "m.jpg", "a.bmp"):
            (tmp_path / name).write_bytes(b"")
        assert discover_candidates(tmp_path) == discover_candidates(tmp_path)
