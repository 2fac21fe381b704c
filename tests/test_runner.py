"""
Tests for the lint runner and CLI.
"""

import json
from pathlib import Path

import pytest

from linterlog.config import LintConfig, RuleConfig
from linterlog.runner import lint_file, main, run


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    """A small tree with one clean and one dirty module."""
    _write(tmp_path / "pkg" / "clean.py", 'log.info("server started")\n')
    _write(tmp_path / "pkg" / "dirty.py", (
        "import logging\n"
        "log = logging.getLogger(__name__)\n"
        'log.info("Server started")\n'
        'log.error("failed!")\n'
    ))
    _write(tmp_path / ".venv" / "lib" / "vendored.py", 'log.info("Ignored!")\n')
    _write(tmp_path / "notes.txt", 'log.info("Not python!")\n')
    return tmp_path


class TestLintFile:

    def test_findings(self, project):
        findings = lint_file(project / "pkg" / "dirty.py", RuleConfig())
        assert [(f.line, f.code) for f in findings] == [(3, "LOG001"), (4, "LOG002")]

    def test_syntax_error_skipped(self, tmp_path):
        path = _write(tmp_path / "broken.py", 'log.info("Broken"\n')
        assert lint_file(path, RuleConfig()) == []

    def test_columns_after_non_ascii_text(self, tmp_path):
        path = _write(tmp_path / "m.py", 'log.info("привет"); log.info("Done")\n')
        findings = lint_file(path, RuleConfig())
        assert [(f.col, f.code) for f in findings] == [(10, "LOG003"), (30, "LOG001")]

    def test_missing_file_skipped(self, tmp_path):
        assert lint_file(tmp_path / "missing.py", RuleConfig()) == []


class TestRun:

    def test_scans_python_files_only(self, project):
        reporter = run(LintConfig(paths=(project,)))
        assert reporter.files_scanned == 2
        assert {Path(f.path).name for f in reporter.findings} == {"dirty.py"}

    def test_explicit_file(self, project):
        reporter = run(LintConfig(paths=(project / "pkg" / "clean.py",)))
        assert reporter.files_scanned == 1
        assert reporter.findings == []

    def test_parallel_matches_serial(self, project):
        for i in range(6):
            _write(project / "more" / f"m{i}.py", f'log.Print("Module {i}")\nlog.Print("ok {i}!")\n')
        serial = run(LintConfig(paths=(project,), jobs=1))
        parallel = run(LintConfig(paths=(project,), jobs=4))
        assert parallel.findings == serial.findings
        assert len(serial.findings) == 2 + 12

    def test_rule_toggles_applied(self, project):
        reporter = run(LintConfig(paths=(project,), rules=RuleConfig.disabled()))
        assert reporter.findings == []


class TestMain:

    def test_findings_exit_code_and_json(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main([str(project / "pkg"), "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert [d["code"] for d in data] == ["LOG001", "LOG002"]

    def test_clean_exit_code(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main([str(project / "pkg" / "clean.py")]) == 0
        assert "OK" in capsys.readouterr().out

    def test_human_output(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        main([str(project / "pkg" / "dirty.py")])
        out = capsys.readouterr().out
        assert "dirty.py:3:10: LOG001 log message should not start with a capital letter" in out

    def test_config_option(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        cfg = _write(project / "rules.yml", "rules:\n  capital_letter: true\n")
        assert main([str(project / "pkg"), "--config", str(cfg), "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert [d["code"] for d in data] == ["LOG001"]

    def test_default_config_location(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        _write(project / "config" / "config.yml", "rules:\n  special_symbols: true\n")
        assert main(["pkg", "--json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert [d["code"] for d in data] == ["LOG002"]

    def test_missing_config_is_error(self, project, monkeypatch, capsys):
        monkeypatch.chdir(project)
        assert main([str(project), "--config", "absent.yml"]) == 2
        assert "not found" in capsys.readouterr().err
