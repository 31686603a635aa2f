import argparse

import pytest
import requests

from aoc_inputs.__main__ import main, split_yd
from aoc_inputs.fetch import current_year


def test_split_yd():
    assert split_yd("2020:7") == (2020, 7)
    assert split_yd("7") == (current_year(), 7)


@pytest.mark.parametrize("value", ["0", "26", "2020:0", "x", "2020:1:2", ""])
def test_split_yd_rejects(value):
    with pytest.raises(argparse.ArgumentTypeError):
        split_yd(value)


def test_prints_cached_input(cache_dir, capsys):
    (cache_dir / "2020").mkdir(parents=True)
    (cache_dir / "2020" / "day02.txt").write_text("cached\n")

    assert main(["-d", "2020:2", "--cache-dir", str(cache_dir), "--token", "T"]) == 0
    assert capsys.readouterr().out == "cached\n"


def test_prints_path(cache_dir, capsys, make_session, monkeypatch):
    session = make_session(body=b"fetched\n")
    monkeypatch.setattr(requests, "Session", lambda: session)

    assert main(["-d", "2020:3", "--cache-dir", str(cache_dir), "--token", "T", "--path"]) == 0
    assert capsys.readouterr().out.strip() == str(cache_dir / "2020" / "day03.txt")
    assert (cache_dir / "2020" / "day03.txt").read_text() == "fetched\n"
    assert session.closed


def test_error_exit_status(cache_dir, make_session, monkeypatch):
    session = make_session(status=500)
    monkeypatch.setattr(requests, "Session", lambda: session)

    assert main(["-d", "2020:4", "--cache-dir", str(cache_dir), "--token", "T"]) == 1


def test_missing_token_exit_status(cache_dir):
    assert main(["-d", "2020:4", "--cache-dir", str(cache_dir)]) == 1


def test_bad_day_is_usage_error(cache_dir):
    with pytest.raises(SystemExit) as exc_info:
        main(["-d", "2020:30", "--cache-dir", str(cache_dir)])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("value", ["0:1", "-1:1", "3000:1"])
def test_split_yd_rejects_year(value):
    with pytest.raises(argparse.ArgumentTypeError):
        split_yd(value)


def test_bad_year_is_usage_error(cache_dir):
    with pytest.raises(SystemExit) as exc_info:
        main(["-d", "0:1", "--cache-dir", str(cache_dir), "--token", "T"])
    assert exc_info.value.code == 2


def test_bad_timeout_exit_status(cache_dir, monkeypatch):
    monkeypatch.setenv("AOC_TIMEOUT", "abc")
    assert main(["-d", "2020:1", "--cache-dir", str(cache_dir), "--token", "T"]) == 1


def test_logger_is_module_scoped():
    from aoc_inputs import __main__ as cli

    assert cli.logger.name == "aoc_inputs.__main__"
