import io
import sys

import pytest

from minitools.scheduler import (
    ConfigError,
    Job,
    create_default_config,
    due_jobs,
    main,
    parse_config,
)


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "job.sh"
    path.write_text("true\n")
    return str(path)


def test_parse_config_reads_jobs_and_skips_comments(script):
    lines = ["# comment\n", "\n", f"1 30 {script}\n", f"  23 59\t{script}\n"]
    assert parse_config(lines) == [Job(1, 30, script), Job(23, 59, script)]


def test_parse_config_skips_invalid_time(script, capsys):
    jobs = parse_config([f"24 0 {script}\n", f"5 60 {script}\n", f"5 5 {script}\n"])
    assert jobs == [Job(5, 5, script)]
    assert capsys.readouterr().err.count("Invalid time in line:") == 2


def test_parse_config_missing_script_is_error(tmp_path):
    with pytest.raises(ConfigError):
        parse_config([f"1 2 {tmp_path / 'missing.sh'}\n"])


@pytest.mark.parametrize("line", ["garbage\n", "1 x /bin/sh\n", "1230 /bin/sh\n", "   \n", ""])
def test_parse_config_malformed_line_is_error(line):
    with pytest.raises(ConfigError):
        parse_config([line])


def test_parse_config_respects_job_limit(script, capsys):
    lines = [f"{h} 0 {script}\n" for h in range(3)]
    jobs = parse_config(lines, max_jobs=2)
    assert [job.hour for job in jobs] == [0, 1]
    assert "Job limit reached (2)" in capsys.readouterr().err


def test_due_jobs_filters_on_hour_and_minute(script):
    jobs = [Job(1, 2, script), Job(1, 3, script), Job(2, 2, script)]
    assert due_jobs(jobs, 1, 2) == [Job(1, 2, script)]
    assert due_jobs(jobs, 4, 4) == []


def test_default_config_holds_no_jobs(tmp_path):
    path = tmp_path / "scheduler.conf"
    create_default_config(path)
    lines = path.read_text(encoding="utf-8").splitlines(keepends=True)
    assert all(line.startswith("#") for line in lines)
    assert parse_config(lines) == []


def test_main_declines_to_create_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("n\n"))
    assert main([]) == 0
    assert not (tmp_path / "scheduler.conf").exists()


def test_main_creates_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("y\n"))
    assert main([]) == 0
    assert (tmp_path / "scheduler.conf").exists()
    assert "Please edit 'scheduler.conf' and restart the program." in capsys.readouterr().out


def test_main_rejects_malformed_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "scheduler.conf").write_text("not a job\n")
    assert main([]) == 1