from review_summary.config import Config
from review_summary.models import ReviewSummaryOptions


def test_defaults_from_empty_env(clean_env):
    config = Config()

    assert config.provider == "gemini"
    assert config.api_key == ""
    assert config.options == ReviewSummaryOptions()


def test_env_fills_gaps(clean_env, monkeypatch):
    monkeypatch.setenv("REVIEW_SUMMARY_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("GOOGLE_API_KEY", "g-env")

    config = Config()

    assert config.provider == "openai"
    assert config.api_key == "sk-env"
    assert config.gemini_api_key == "g-env"


def test_explicit_values_win(clean_env, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-env")

    config = Config(provider="gemini", gemini_api_key="g-arg", tone="casual")
    provider = config.to_provider()

    assert provider.name == "gemini"
    assert provider.api_key == "g-arg"
    assert provider.options.tone == "casual"
    assert provider.options.max_characters == 250


def test_gemini_key_preferred_over_google_key(clean_env, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini")
    monkeypatch.setenv("GOOGLE_API_KEY", "google")
    assert Config().gemini_api_key == "gemini"


def test_unknown_provider_has_no_key(clean_env, monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    assert Config(provider="claude").api_key == ""
