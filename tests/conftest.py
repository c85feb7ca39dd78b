import pytest

from typoscore._config import ENV_ALGORITHM, ENV_NGRAM_SIZE, ENV_THRESHOLD


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test with the built-in defaults, whatever the shell exports."""
    for name in (ENV_ALGORITHM, ENV_THRESHOLD, ENV_NGRAM_SIZE):
        monkeypatch.delenv(name, raising=False)
