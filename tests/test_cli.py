import pytest

from sharing_instant.cli import main


def _run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out.splitlines()


def test_init_prints_warning_and_completion(capsys):
    code, lines = _run(capsys, ["init"])
    assert code == 0
    assert lines[0] == "Trinity: Initializing..."
    assert lines[-1] == "Trinity initialized."
    assert "Proceed? [y/N]" in lines


def test_check_reports_success(capsys):
    code, lines = _run(capsys, ["check"])
    assert code == 0
    assert lines == ["Trinity: Checking synchronization...", "All checks passed."]


def test_status_reports_uninitialized(capsys):
    _, lines = _run(capsys, ["status"])
    assert lines[0] == "Trinity: Status"
    assert "  State: UNINITIALIZED" in lines


@pytest.mark.parametrize("argv", [[], ["unknown"], ["--help"]])
def test_anything_else_prints_usage(capsys, argv):
    code, lines = _run(capsys, argv)
    assert code == 0
    assert lines[0] == "Trinity — Documentation/Tests/Code Sync Tool"
    assert lines[1] == ""
    assert "Usage:" in lines
    assert "  trinity status  Show current synchronization state" in lines


def test_extra_arguments_are_ignored(capsys):
    _, with_extra = _run(capsys, ["check", "more", "args"])
    _, plain = _run(capsys, ["check"])
    assert with_extra == plain


def test_reads_sys_argv_when_none(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["trinity", "status"])
    code, lines = _run(capsys, None)
    assert code == 0
    assert lines[0] == "Trinity: Status"