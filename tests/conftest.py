import pytest

from tests.store_helpers import prepare_store, sqlite_url_for


@pytest.fixture
def sqlite_url(tmp_path) -> str:
    """URL of a fresh SQLite store with the schema created and catalog seeded."""
    url = sqlite_url_for(tmp_path / "store.db")
    prepare_store(url)
    return url
