import io

import pytest

from wnucore.rm import confirm_and_delete, main


def _answer(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_rm_deletes_file(tmp_path, monkeypatch):
    file_path = tmp_path / "test.txt"
    file_path.touch()
    assert file_path.exists()
    _answer(monkeypatch, "y\n")
    assert main([str(file_path)]) == 0
    assert not file_path.exists()


def test_rm_accepts_yes(tmp_path, monkeypatch):
    file_path = tmp_path / "test.txt"
    file_path.touch()
    _answer(monkeypatch, "  YES \n")
    assert confirm_and_delete(file_path, False) is True
    assert not file_path.exists()


@pytest.mark.parametrize("reply", ["n\n", "\n", "", "maybe\n"])
def test_rm_cancels(tmp_path, monkeypatch, capsys, reply):
    file_path = tmp_path / "keep.txt"
    file_path.touch()
    _answer(monkeypatch, reply)
    assert confirm_and_delete(file_path, False) is False
    assert file_path.exists()
    assert "Cancelled." in capsys.readouterr().out


def test_rm_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 0
    assert "does not exist" in capsys.readouterr().err


def test_rm_no_arguments(capsys):
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().err


def test_rm_recursive_flag_without_path(capsys):
    assert main(["-r"]) == 0
    assert "Please provide a path to delete with -r flag" in capsys.readouterr().err


def test_rm_empty_directory_without_flag(tmp_path, monkeypatch):
    target = tmp_path / "empty"
    target.mkdir()
    _answer(monkeypatch, "y\n")
    assert main([str(target)]) == 0
    assert not target.exists()


def test_rm_non_empty_directory_without_flag_fails(tmp_path, monkeypatch):
    target = tmp_path / "full"
    target.mkdir()
    (target / "inner.txt").touch()
    _answer(monkeypatch, "y\n")
    with pytest.raises(OSError, match="Perhaps it's not empty"):
        confirm_and_delete(target, False)
    assert target.exists()


def test_rm_main_reports_failure(tmp_path, monkeypatch, capsys):
    target = tmp_path / "full"
    target.mkdir()
    (target / "inner.txt").touch()
    _answer(monkeypatch, "y\n")
    assert main([str(target)]) == 1
    assert "Couldn't delete the directory" in capsys.readouterr().err
    assert (target / "inner.txt").exists()


@pytest.mark.parametrize("flag", ["-r", "--recursive"])
def test_rm_recursive_deletes_tree(tmp_path, monkeypatch, flag):
    target = tmp_path / "tree"
    (target / "sub").mkdir(parents=True)
    (target / "sub" / "leaf.txt").write_text("data")
    _answer(monkeypatch, "y\n")
    assert main([flag, str(target)]) == 0
    assert not target.exists()


def test_rm_recursive_prompt_wording(tmp_path, monkeypatch, capsys):
    target = tmp_path / "tree"
    target.mkdir()
    _answer(monkeypatch, "n\n")
    assert confirm_and_delete(target, True) is False
    out = capsys.readouterr().out
    assert "force delete" in out
    assert "and all of its contents?" in out