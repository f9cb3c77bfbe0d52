import pytest

from boggle_solver.cli import main


def test_solve_with_inline_words(capsys):
    code = main(["dzxeai", "--width", "3", "--height", "2", "--words", "daze", "zeda", "daxi"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["daxi", "daze", "zeda"]


def test_square_board_with_bundled_dictionary(capsys):
    code = main(["yoxrbaved"])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == sorted(out)
    assert "derby" in out
    assert "verb" in out


def test_dictionary_file(tmp_path, capsys):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("c\ncat\n", encoding="utf-8")
    code = main(["cat", "--width", "3", "--height", "1", "--dictionary", str(dict_file), "--min-length", "1"])
    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["c", "cat"]


def test_timing_printed_first(capsys):
    code = main(["c", "--words", "c", "--timing"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    stages = [part.split("=")[0] for part in lines[0].split()]
    assert stages == ["load", "solve", "total"]
    assert all(part.endswith("ms") for part in lines[0].split())
    assert lines[1:] == ["c"]


def test_non_square_without_dimensions():
    with pytest.raises(SystemExit) as exc_info:
        main(["abc", "--words", "abc"])
    assert exc_info.value.code == 2


def test_width_without_height():
    with pytest.raises(SystemExit):
        main(["abcd", "--width", "2", "--words", "ab"])


def test_missing_dictionary_file(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main(["abcd", "--dictionary", str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 2


def test_board_errors_reported(capsys):
    code = main(["abc", "--width", "3", "--height", "3", "--words", "abc"])
    assert code == 2
    assert "Error:" in capsys.readouterr().err

    code = main(["abc", "--width", "0", "--height", "3", "--words", "abc"])
    assert code == 2


def test_load_and_solve_are_logged(caplog):
    with caplog.at_level("INFO", logger="boggle"):
        assert main(["dzxeai", "--width", "3", "--height", "2", "--words", "daze", "zeda", "daxi"]) == 0
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Loaded 3 words") for m in messages)
    assert any(m.startswith("Solved 3x2 board") and m.endswith(": 3 words") for m in messages)


def test_undecodable_dictionary_file(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_bytes(b"caf\xe9\ncat\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["cat", "--width", "3", "--height", "1", "--dictionary", str(dict_file)])
    assert exc_info.value.code == 2
