"""Shared fixtures for markus CLI tests."""

import textwrap

import pytest
from typer.testing import CliRunner

EXTENSION_MODULE = '''
def count_words(text, parameters, options):
    return str(len(text.split(" ")))


wordcount = {
    "format": {"name": "wordcount", "docs": "A number of words", "file_format": "utf8"},
    "transforms": {"plaintext": {"wordcount": count_words}},
}
'''


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    """Point the CLI at a config file inside the test's temp directory."""
    path = tmp_path / "markus" / "config.yaml"
    monkeypatch.setenv("MARKUS_CONFIG", str(path))
    return path


@pytest.fixture
def extension_module(tmp_path, monkeypatch):
    """Make an importable module exposing a wordcount extension."""
    package_dir = tmp_path / "ext"
    package_dir.mkdir()
    (package_dir / "markus_wordcount.py").write_text(textwrap.dedent(EXTENSION_MODULE))
    monkeypatch.syspath_prepend(str(package_dir))
    return "markus_wordcount:wordcount"
