import io
import sys

import pytest

from minitools import files


def test_cat_files_writes_contents_then_newline(tmp_path):
    first = tmp_path / "a.txt"
    first.write_text("hello\nworld\n")
    second = tmp_path / "b.txt"
    second.write_text("x")
    out, err = io.StringIO(), io.StringIO()
    failures = files.cat_files([str(first), str(second)], out, err)
    assert failures == 0
    assert out.getvalue() == "hello\nworld\n\nx\n"
    assert err.getvalue() == ""


def test_cat_files_reports_missing_file(tmp_path):
    missing = tmp_path / "nope"
    out, err = io.StringIO(), io.StringIO()
    failures = files.cat_files([str(missing)], out, err)
    assert failures == 1
    assert out.getvalue() == ""
    assert err.getvalue() == f"Could not open file: {missing}\n"


def test_head_lines_numbers_first_n():
    assert files.head_lines(["a\n", "b\n", "c\n"], 2) == ["1: a\n", "2: b\n"]


def test_head_lines_zero_gives_nothing():
    assert files.head_lines(["a\n", "b\n"], 0) == []


def test_head_lines_shorter_input_returns_all():
    assert len(files.head_lines(["a\n"], 10)) == 1


def test_count_lines_counts_lines(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("one\ntwo\nthree")
    assert files.count_lines(path) == 3


def test_count_lines_splits_long_lines(tmp_path):
    fits = tmp_path / "fits.txt"
    fits.write_text("a" * 1022 + "\n")
    long = tmp_path / "long.txt"
    long.write_text("a" * 2000 + "\n")
    assert files.count_lines(fits) == 1
    assert files.count_lines(long) == 2


def test_file_size_matches_written_bytes(tmp_path):
    path = tmp_path / "blob"
    path.write_bytes(bytes(123))
    assert files.file_size(path) == 123


def test_file_size_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.file_size(tmp_path / "missing")


def test_list_directory_includes_dot_entries(tmp_path):
    (tmp_path / "f1").write_text("x")
    (tmp_path / "d1").mkdir()
    assert set(files.list_directory(tmp_path)) == {".", "..", "f1", "d1"}


def test_copy_to_directory_copies_bytes(tmp_path):
    src_dir = tmp_path / "src"
    src_dir.mkdir()
    dest_dir = tmp_path / "dest"
    dest_dir.mkdir()
    source = src_dir / "data.bin"
    payload = b"line one\nline\0two\n"
    source.write_bytes(payload)
    dest = files.copy_to_directory(str(source), str(dest_dir))
    assert dest == dest_dir / "data.bin"
    assert dest.read_bytes() == payload


def test_copy_to_directory_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        files.copy_to_directory(str(tmp_path / "none"), str(tmp_path))


def test_copy_to_directory_missing_destination(tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("x")
    with pytest.raises(NotADirectoryError):
        files.copy_to_directory(str(source), str(tmp_path / "nodir"))


def test_tee_writes_both_targets(tmp_path):
    data = bytes(range(256)) * 40
    out = io.BytesIO()
    target = tmp_path / "copy"
    count = files.tee(io.BytesIO(data), out, target)
    assert count == len(data)
    assert out.getvalue() == data
    assert target.read_bytes() == data


def test_tee_truncates_existing_file(tmp_path):
    target = tmp_path / "copy"
    target.write_bytes(b"old contents that are long")
    files.tee(io.BytesIO(b"new"), io.BytesIO(), target)
    assert target.read_bytes() == b"new"


def test_slow_cat_copies_file(tmp_path):
    path = tmp_path / "f"
    data = b"x" * 3000
    path.write_bytes(data)
    out = io.BytesIO()
    assert files.slow_cat(path, out, 0) == len(data)
    assert out.getvalue() == data


def test_linecount_main_output(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("a\nb\n")
    assert files.linecount_main([str(path)]) == 0
    assert capsys.readouterr().out == "Line count: 2\n"


def test_linecount_main_wrong_arguments(capsys):
    assert files.linecount_main([]) == 1
    assert "only One command line argument needed" in capsys.readouterr().err


def test_filesize_main_output(tmp_path, capsys):
    path = tmp_path / "f"
    path.write_bytes(b"abcd")
    assert files.filesize_main([str(path)]) == 0
    assert capsys.readouterr().out == f"File {path} has size  4 bytes\n"


def test_cat_main_requires_arguments(capsys):
    assert files.cat_main([]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_head_main_respects_n(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_text("first\nsecond\n")
    assert files.head_main(["-n", "1", str(path)]) == 0
    assert capsys.readouterr().out == "1: first\n\n"


def test_listdir_main_rejects_extra_arguments(capsys):
    assert files.listdir_main(["a", "b"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_copy_main_reports_success(tmp_path, capsys):
    source = tmp_path / "a.txt"
    source.write_text("content")
    dest_dir = tmp_path / "out"
    dest_dir.mkdir()
    assert files.copy_main([str(source), str(dest_dir)]) == 0
    assert capsys.readouterr().out == "File copied successfully\n"
    assert (dest_dir / "a.txt").read_text() == "content"


def test_copy_main_missing_directory(tmp_path, capsys):
    source = tmp_path / "a.txt"
    source.write_text("content")
    assert files.copy_main([str(source), str(tmp_path / "nodir")]) == 1
    assert "Directory does not exist" in capsys.readouterr().err


def test_tee_main_copies_stdin(tmp_path, monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"abc")))
    target = tmp_path / "out"
    assert files.tee_main([str(target)]) == 0
    assert target.read_bytes() == b"abc"
    assert capsysbinary.readouterr().out == b"abc"


def test_icat_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert files.icat_main([str(missing)]) == 1
    assert capsys.readouterr().err == f"Could not open file: {missing}\n"