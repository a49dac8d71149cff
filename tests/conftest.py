import pytest

from groq_client.config import get_settings

from tests.fakes import FakeGroq


@pytest.fixture(autouse=True)
def set_env_defaults(monkeypatch, tmp_path):
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    monkeypatch.delenv("GROQ_CHAT_COMPLETION_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_groq():
    return FakeGroq()
