"""Tests for the termtext command-line entry point."""

import json

import pytest

from termtext.__main__ import main


class TestSortCommand:
    def test_natural_order(self, capsys):
        assert main(["sort", "img10", "img2", "img1"]) == 0
        assert capsys.readouterr().out.splitlines() == ["img1", "img2", "img10"]

    def test_locale_from_config_env(self, capsys, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOCALE", "qaa-QM")
        assert main(["sort", "b", "a"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a", "b"]

    def test_invalid_locale(self, capsys):
        assert main(["sort", "--locale", "!!", "a"]) == 1
        assert "invalid locale" in capsys.readouterr().err


class TestWidthCommand:
    def test_width(self, capsys):
        assert main(["width", "日abc"]) == 0
        assert capsys.readouterr().out.strip() == "5"

    def test_range(self, capsys):
        assert main(["width", "日本ab", "--range", "2", "5"]) == 0
        assert capsys.readouterr().out.strip() == "本a"

    def test_last(self, capsys):
        assert main(["width", "abcdefghij", "--last", "3"]) == 0
        assert capsys.readouterr().out.strip() == "hij"


class TestParseCommands:
    def test_pairs(self, capsys, pairs_file):
        assert main(["pairs", str(pairs_file)]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows[2] == ["*.tar gz", "01;31"]

    def test_arrays_bounds(self, capsys, tmp_path):
        conf = tmp_path / "cmds.conf"
        conf.write_text("map j down\nmap k up\n")
        assert main(["arrays", str(conf), "--min", "3", "--max", "3"]) == 0
        assert json.loads(capsys.readouterr().out) == [["map", "j", "down"], ["map", "k", "up"]]

    def test_malformed_row(self, capsys, tmp_path):
        conf = tmp_path / "bad.conf"
        conf.write_text("a b\na b c\n")
        assert main(["pairs", str(conf)]) == 1
        err = capsys.readouterr().err
        assert ":2: expected 2 columns but found: a b c" in err

    def test_missing_file(self, capsys, tmp_path):
        assert main(["pairs", str(tmp_path / "missing.conf")]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_invalid_utf8_replaced(self, capsys, tmp_path):
        conf = tmp_path / "latin1.conf"
        conf.write_bytes(b"caf\xe9 ok\nkey \xff\xfe\n")
        assert main(["pairs", str(conf)]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows == [["caf\ufffd", "ok"], ["key", "\ufffd\ufffd"]]

    def test_invalid_utf8_malformed_row(self, capsys, tmp_path):
        conf = tmp_path / "bad.conf"
        conf.write_bytes(b"a b\n\xff\n")
        assert main(["pairs", str(conf)]) == 1
        err = capsys.readouterr().err
        assert ":2: expected 2 columns" in err
        assert "Traceback" not in err

    def test_debug_log_has_row_context(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv("TERMTEXT_LOG_LEVEL", "DEBUG")
        conf = tmp_path / "bad.conf"
        conf.write_text("a b c\n")
        assert main(["pairs", str(conf)]) == 1
        entries = [
            json.loads(line)
            for line in capsys.readouterr().err.splitlines()
            if line.startswith("{")
        ]
        rejected = [e for e in entries if e.get("path") == str(conf)]
        assert rejected and rejected[0]["line_no"] == 1


class TestHumanizeCommand:
    def test_humanize(self, capsys):
        assert main(["humanize", "1500"]) == 0
        assert capsys.readouterr().out.strip() == "1.5K"


class TestConfigOption:
    def test_missing_config(self, capsys):
        assert main(["--config", "/nonexistent/termtext.yaml", "humanize", "1"]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_config(self, capsys, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("log_level: LOUD\n")
        assert main(["--config", str(config_file), "humanize", "1"]) == 1

    def test_config_locale(self, capsys, tmp_path):
        config_file = tmp_path / "termtext.yaml"
        config_file.write_text("locale: ''\nlog_format: text\n")
        assert main(["--config", str(config_file), "sort", "a10", "a9"]) == 0
        assert capsys.readouterr().out.splitlines() == ["a9", "a10"]


def test_command_required():
    with pytest.raises(SystemExit):
        main([])
