import pyperclip
import pytest

from rlabs.main import main


def test_list(capsys):
    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "1. Lab 1: Getting Started with R" in out
    assert "11. Lab 11" in out


def test_show(capsys):
    assert main(["show", "5"]) == 0

    out = capsys.readouterr().out
    assert "x[x < 0] <- 0" in out
    assert "Exercise:" in out


def test_show_unknown_lab(capsys):
    assert main(["show", "99"]) == 1
    assert "No lab with index" in capsys.readouterr().err


def test_copy(monkeypatch, capsys):
    copied = []
    monkeypatch.setattr(pyperclip, "determine_clipboard", lambda: (copied.append, lambda: ""))

    assert main(["copy", "1"]) == 0

    assert copied == ["x <- 10\ny <- 5\nls()\nrm(y)\nls()"]
    assert "Copied!" in capsys.readouterr().out


def test_copy_without_clipboard(monkeypatch, capsys):
    monkeypatch.setattr(pyperclip, "determine_clipboard", pyperclip.init_no_clipboard)

    assert main(["copy", "1"]) == 1
    assert "Clipboard not available" in capsys.readouterr().err


def test_bad_catalog(tmp_path, capsys):
    path = tmp_path / "labs.json"
    path.write_text("[]", encoding="utf-8")

    assert main(["--catalog", str(path), "list"]) == 1
    assert "Invalid catalog" in capsys.readouterr().err


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
