import pytest

from wirelang.config import get_settings
from wirelang.core.sequence import identity_scope


@pytest.fixture(autouse=True)
def fresh_identity():
    """Every test starts counting ids and labels from 1."""
    with identity_scope() as seq:
        yield seq


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
