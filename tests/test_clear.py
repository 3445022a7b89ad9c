from wnucore.clear import main


def test_clear_writes_erase_sequence(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "\x1b[2J"


def test_clear_ignores_arguments(capsys):
    assert main(["anything"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "\x1b[2J"
    assert captured.err == ""