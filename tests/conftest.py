import pytest

from entrypoint_assets.cache import internal_only_clear_cache


@pytest.fixture(autouse=True)
def _fresh_shared_caches():
    internal_only_clear_cache()
    yield
    internal_only_clear_cache()
