import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_readme_in_metadata_is_project_readme():
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    m = re.search(r'^readme = "([^"]+)"$', text, re.MULTILINE)
    assert m and m.group(1) == "README.md"
    readme = (ROOT / m.group(1)).read_text(encoding="utf-8")
    assert "gregorian_to_hijri" in readme
