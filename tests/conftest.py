"""
Shared fixtures for file cache tests.
"""

from datetime import datetime, timezone

import pytest

from todo_cache.caching import FileCache
from todo_cache.models import Importance, TodoItem
from todo_cache.storage import DocumentDirectoryResolver


@pytest.fixture
def document_dir(tmp_path):
    """Temporary document directory."""
    path = tmp_path / "Documents"
    path.mkdir()
    return path


@pytest.fixture
def resolver(document_dir):
    """Resolver rooted at the temporary document directory."""
    return DocumentDirectoryResolver(base_dir=document_dir)


@pytest.fixture
def cache(resolver):
    """Empty to-do item cache."""
    return FileCache(record_type=TodoItem, resolver=resolver)


@pytest.fixture
def sample_items():
    """A few to-do items covering optional fields."""
    created = datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc)
    return [
        TodoItem(
            id="a",
            text="Buy milk",
            deadline=datetime(2024, 1, 1, tzinfo=timezone.utc),
            created_at=created
        ),
        TodoItem(id="b", text="Call mom", created_at=created),
        TodoItem(
            id="c",
            text='Write report, "final" version\nwith appendix \\ notes',
            importance=Importance.IMPORTANT,
            is_done=True,
            created_at=created,
            changed_at=datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc),
            color="#FF8800"
        ),
    ]


@pytest.fixture
def filled_cache(cache, sample_items):
    """Cache holding the sample items."""
    for item in sample_items:
        cache.add(item)
    return cache
