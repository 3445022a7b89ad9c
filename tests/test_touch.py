import pytest

from wnucore.touch import main, touch


def test_touch_creates_empty_files(tmp_path):
    paths = [tmp_path / "a.txt", tmp_path / "b.bat"]
    touch(paths)
    assert all(p.exists() and p.read_bytes() == b"" for p in paths)


def test_touch_keeps_existing_content(tmp_path):
    path = tmp_path / "existing.txt"
    path.write_text("keep me")
    touch([path])
    assert path.read_text() == "keep me"


def test_touch_missing_parent_raises(tmp_path):
    with pytest.raises(OSError):
        touch([tmp_path / "no" / "such" / "file.txt"])


def test_touch_stops_at_first_failure(tmp_path):
    good_before = tmp_path / "first.txt"
    bad = tmp_path / "missing" / "x.txt"
    good_after = tmp_path / "after.txt"
    with pytest.raises(OSError):
        touch([good_before, bad, good_after])
    assert good_before.exists()
    assert not good_after.exists()


def test_main_creates_all_files(tmp_path):
    names = [tmp_path / "one", tmp_path / "two.txt", tmp_path / "three.bat"]
    assert main([str(p) for p in names]) == 0
    assert all(p.is_file() for p in names)


def test_main_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing" / "f.txt")]) == 1
    assert "Error" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["-h"], ["--help"]])
def test_main_help(argv, capsys, tmp_path):
    assert main(argv) == 0
    assert "touch - create an empty file" in capsys.readouterr().out