import io

import pytest

from ipfilter.cli import main, read_pool, run
from ipfilter.core import filter_any, sort_descending

LINES = [
    "1.1.1.1\t0\t1\n",
    "46.70.1.2\t0\t1\n",
    "46.71.0.0\t0\t1\n",
    "5.46.0.1\t0\t1\n",
    "1.200.3.4\t0\t1\n",
]

EXPECTED = [
    # whole pool, descending
    "46.71.0.0",
    "46.70.1.2",
    "5.46.0.1",
    "1.200.3.4",
    "1.1.1.1",
    # first octet 1
    "1.200.3.4",
    "1.1.1.1",
    # 46.70
    "46.70.1.2",
    # any octet 46
    "46.71.0.0",
    "46.70.1.2",
    "5.46.0.1",
]


def test_read_pool_takes_first_column():
    pool = read_pool(["1.2.3.4\t5\t6\n", "10.0.0.1\t1\t1"])
    assert pool == [(1, 2, 3, 4), (10, 0, 0, 1)]


def test_read_pool_line_without_tabs():
    assert read_pool(["7.8.9.10\n"]) == [(7, 8, 9, 10)]


def test_read_pool_bad_line():
    with pytest.raises(ValueError, match="Wrong format ip"):
        read_pool(["1.2.3\tx\n"])


def test_run_prints_all_blocks():
    out = io.StringIO()
    run(LINES, out)
    assert out.getvalue().splitlines() == EXPECTED


def test_run_first_block_is_sorted_pool():
    out = io.StringIO()
    run(LINES, out)
    printed = out.getvalue().splitlines()
    pool = read_pool(LINES)
    first_block = printed[: len(pool)]
    assert read_pool(first_block) == sort_descending(pool)
    tail = read_pool(printed[-3:])
    assert tail == filter_any(sort_descending(pool), 46)


def test_main_reads_file(tmp_path, monkeypatch, capsys):
    (tmp_path / "ip_filter.tsv").write_text("".join(LINES), encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == EXPECTED
    assert captured.err == ""


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main() == 0
    captured = capsys.readouterr()
    assert "Could not open ip_filter.tsv file" in captured.err
    assert captured.out == ""


def test_main_bad_address(tmp_path, monkeypatch, capsys):
    (tmp_path / "ip_filter.tsv").write_text("1.2.3.400\t0\t0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main() == 0
    captured = capsys.readouterr()
    assert "Wrong format ip" in captured.err
    assert captured.out == ""