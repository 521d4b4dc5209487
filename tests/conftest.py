import pytest

from html_skeleton.adapters import parse_document


@pytest.fixture
def soup_of():
    """Parses markup with the default parser."""
    return parse_document


@pytest.fixture(autouse=True)
def _clear_parser_env(monkeypatch):
    monkeypatch.delenv("HTML_SKELETON_PARSER", raising=False)
