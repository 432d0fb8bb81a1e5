import pytest

from exercisekit.listdir import DirectoryIterator, main


def test_nonexisting_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        DirectoryIterator(str(tmp_path / "no-such-directory"))


def test_empty_directory(tmp_path):
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", ".."]


def test_nonempty_directory(tmp_path):
    (tmp_path / "foo.txt").write_text("The Foo Diaries\n")
    (tmp_path / "bar.png").write_text("<PNG>\n")
    (tmp_path / "crab.rs").write_text("//! Crab\n")
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", "..", "bar.png", "crab.rs", "foo.txt"]


def test_accepts_path_objects(tmp_path):
    (tmp_path / "a").write_text("x")
    assert sorted(DirectoryIterator(tmp_path)) == [".", "..", "a"]


def test_bytes_path_yields_bytes(tmp_path):
    (tmp_path / "a").write_text("x")
    assert sorted(DirectoryIterator(bytes(tmp_path))) == [b".", b"..", b"a"]


def test_file_is_not_a_directory(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        DirectoryIterator(str(target))


def test_embedded_nul_is_invalid():
    with pytest.raises(ValueError, match="Invalid path"):
        DirectoryIterator("bad\0path")


def test_context_manager_closes(tmp_path):
    (tmp_path / "a").write_text("x")
    with DirectoryIterator(str(tmp_path)) as entries:
        assert next(entries) == "."
    assert list(entries) == []


def test_exhausted_iterator_stays_empty(tmp_path):
    entries = DirectoryIterator(str(tmp_path))
    assert len(list(entries)) == 2
    assert list(entries) == []


def test_main_lists_current_directory(tmp_path, monkeypatch, capsys):
    (tmp_path / "listed.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("files: ")
    assert "listed.txt" in out