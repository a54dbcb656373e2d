"""
Tests for package metadata.
"""

import re
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_readme_is_project_readme():
    pyproject = (PROJECT_ROOT / "pyproject.toml").read_text()
    match = re.search(r'^readme\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)

    assert match is not None
    assert match.group(1) == "README.md"
    assert (PROJECT_ROOT / match.group(1)).is_file()
