import pytest

from pwstrength.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings overrides from the host environment out of tests."""
    for var in ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)
