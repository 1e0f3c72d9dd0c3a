"""Tests for the dns-name command line."""

from __future__ import annotations

import pytest

from dns_name.cli import EXIT_INVALID_NAME, EXIT_LOAD_ERROR, main

from tests.suffix.conftest import PUBLIC_SUFFIX_TEXT, RULES


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.txt"
    path.write_text(RULES + "\n", encoding="utf-8")
    return path


@pytest.fixture
def psl_file(tmp_path):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(PUBLIC_SUFFIX_TEXT, encoding="utf-8")
    return path


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParseCommand:
    def test_prints_parts(self, rules_file, capsys):
        assert _run(["parse", "--list", str(rules_file), "WWW.Example.co.uk"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == (
            "www.example.co.uk\tsuffix=co.uk\troot=example.co.uk\tregistrable=example"
        )

    def test_absent_parts_shown_as_dash(self, rules_file, capsys):
        assert _run(["parse", "--list", str(rules_file), "com"]) == 0
        assert "root=-" in capsys.readouterr().out

    def test_psl_format(self, psl_file, capsys):
        assert _run(["parse", "--list", str(psl_file), "--psl", "www.ck"]) == 0
        assert "suffix=ck\troot=www.ck" in capsys.readouterr().out

    def test_invalid_name_continues(self, rules_file, capsys):
        code = _run(["parse", "--list", str(rules_file), "exa..mple.com", "example.com"])
        assert code == EXIT_INVALID_NAME
        captured = capsys.readouterr()
        assert "exa..mple.com" in captured.err
        assert "root=example.com" in captured.out


class TestCheckCommand:
    def test_reports_counts(self, rules_file, capsys):
        assert _run(["check", "--list", str(rules_file)]) == 0
        out = capsys.readouterr().out
        assert "rules: 17" in out
        assert "nodes:" in out


class TestErrors:
    def test_missing_list(self, tmp_path, capsys):
        code = _run(["check", "--list", str(tmp_path / "nope.txt")])
        assert code == EXIT_LOAD_ERROR
        assert capsys.readouterr().err.startswith("dns-name: error:")

    def test_invalid_list(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("com,,net", encoding="utf-8")
        assert _run(["check", "--list", str(path)]) == EXIT_LOAD_ERROR
        assert "invalid rule" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert _run([]) == 0
        assert "usage: dns-name" in capsys.readouterr().out


class TestCheckRules:
    def test_rule_lookup(self, rules_file, capsys):
        code = _run([
            "check", "--list", str(rules_file),
            "--rule", "co.uk", "--rule", "fbsbx.com",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "co.uk: listed" in out
        assert "fbsbx.com: not listed" in out

    def test_unicode_rule_lookup(self, tmp_path, capsys):
        path = tmp_path / "public_suffix_list.dat"
        path.write_text("cn\n公司.cn\n", encoding="utf-8")
        code = _run(["check", "--list", str(path), "--psl", "--rule", "公司.cn"])
        assert code == 0
        assert "公司.cn: listed" in capsys.readouterr().out

    def test_malformed_rule(self, rules_file, capsys):
        code = _run(["check", "--list", str(rules_file), "--rule", "a..b"])
        assert code == EXIT_INVALID_NAME
        assert "invalid rule" in capsys.readouterr().err
