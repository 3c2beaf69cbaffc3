import pytest

from cognito_google_idp.secrets import SecretValue


class _StubConfig:
    def __init__(self, secrets):
        self.secrets = secrets
        self.requested = []

    def require_secret(self, key):
        self.requested.append(key)
        return self.secrets[key]


def test_plain_text_is_revealed():
    secret = SecretValue.unsafe_plain_text("s3cret")
    assert secret.reveal() == "s3cret"
    assert secret.source == "plaintext"


def test_repr_hides_value():
    secret = SecretValue.unsafe_plain_text("s3cret")
    assert "s3cret" not in repr(secret)
    assert "s3cret" not in str(secret)
    assert "****" in repr(secret)


def test_from_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_TEST_SECRET", "from-env")
    secret = SecretValue.from_env("GOOGLE_TEST_SECRET")
    assert secret.reveal() == "from-env"
    assert secret.source == "env:GOOGLE_TEST_SECRET"


def test_from_env_missing(monkeypatch):
    monkeypatch.delenv("GOOGLE_TEST_SECRET", raising=False)
    with pytest.raises(KeyError):
        SecretValue.from_env("GOOGLE_TEST_SECRET")
    assert SecretValue.from_env("GOOGLE_TEST_SECRET", default="fallback").reveal() == "fallback"


def test_from_config_requires_secret():
    sentinel = object()
    config = _StubConfig({"googleClientSecret": sentinel})

    secret = SecretValue.from_config(config, "googleClientSecret")

    assert config.requested == ["googleClientSecret"]
    assert secret.reveal() is sentinel


def test_none_is_rejected():
    with pytest.raises(ValueError):
        SecretValue(None)
