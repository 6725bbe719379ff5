"""
Pytest configuration and fixtures
"""
from pathlib import Path

import pendulum
import pytest

from blogstore.models import ContentItem
from blogstore.store import ContentStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def corpus_dir() -> Path:
    """Example corpus shipped with the tests"""
    return FIXTURES_DIR / "corpus"


@pytest.fixture
def corpus_store(corpus_dir) -> ContentStore:
    """Store loaded from the example corpus"""
    return ContentStore.from_path(corpus_dir)


@pytest.fixture
def make_item():
    """Factory for in-memory content items"""
    def _make(
        slug: str = "hello-world",
        date: str = "2018-05-12T10:00:00+02:00",
        body: str = "Some text.\n",
        **overrides,
    ) -> ContentItem:
        fields = {
            "title": slug.replace("-", " ").title(),
            "slug": slug,
            "date": pendulum.parse(date),
            "body": body,
        }
        fields.update(overrides)
        return ContentItem(**fields)

    return _make


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from the real user config"""
    monkeypatch.delenv("BLOGSTORE_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
