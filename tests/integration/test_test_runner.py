"""Integration tests for the ``python -m tests`` runner."""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _run(*args):
    return subprocess.run(
        [sys.executable, "-m", "tests", *args, "-p", "no:cacheprovider"],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=120,
    )


class TestModuleRunner:

    def test_passing_selection(self):
        result = _run("tests/unit/test_semver.py", "-q")
        assert result.returncode == 0
        assert "All tests passed!" in result.stdout

    def test_failing_selection_reports_exit_code(self):
        result = _run("tests/unit/test_semver.py", "-q", "-k", "no_such_test_name")
        # pytest exits with 5 when nothing is collected
        assert result.returncode == 5
        assert "Tests failed with exit code: 5" in result.stdout
