import pytest

from content_optimizer.config import load_config


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def words():
    """Returns n simple one-syllable words joined by spaces."""
    def _words(n, word="cat"):
        return " ".join([word] * n)
    return _words
