import pytest

from yuletide.runner import run


def test_solver_receives_file_content(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("hello")
    status = run(str.upper, [str(path)], "unused.txt")
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("HELLO\n---\ntime: ")


def test_default_path_is_used_without_arguments(tmp_path, capsys):
    path = tmp_path / "default.txt"
    path.write_text("abc")
    status = run(str.upper, [], str(path))
    out = capsys.readouterr().out
    assert status == 0
    assert out.splitlines()[0] == "ABC"


def test_missing_file_is_reported(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    status = run(str.upper, [str(missing)], "unused.txt")
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith(f"Cannot read '{missing}': ")
    assert "time:" not in out


def test_solver_error_is_reported(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("x")

    def failing(content):
        raise ValueError("bad input")

    status = run(failing, [str(path)], "unused.txt")
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("ERROR: bad input\n")
    assert "---\ntime: " in out


@pytest.mark.parametrize("report", [None, ""])
def test_empty_report_prints_only_timing(tmp_path, capsys, report):
    path = tmp_path / "input.txt"
    path.write_text("x")
    status = run(lambda content: report, [str(path)], "unused.txt")
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("---\ntime: ")