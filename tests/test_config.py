"""Tests for FireEagleConfig construction and loading."""

import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from fireeagle import ConfigurationError, FireEagleConfig


class TestConstruction:
    """Required and optional credential fields."""

    @pytest.mark.parametrize(
        ("kwargs", "missing"),
        [
            ({}, "consumer_key"),
            ({"consumer_secret": "s"}, "consumer_key"),
            ({"consumer_key": "k"}, "consumer_secret"),
            ({"consumer_key": "", "consumer_secret": "s"}, "consumer_key"),
            ({"consumer_key": "k", "consumer_secret": None}, "consumer_secret"),
        ],
    )
    def test_missing_credentials_raise(self, kwargs: dict, missing: str) -> None:
        """Missing consumer key or secret is a construction error."""
        with pytest.raises(ConfigurationError) as exc_info:
            FireEagleConfig(**kwargs)

        assert exc_info.value.field == missing
        assert missing in exc_info.value.message

    def test_is_immutable(self) -> None:
        config = FireEagleConfig(consumer_key="k", consumer_secret="s")

        with pytest.raises(FrozenInstanceError):
            config.consumer_key = "other"  # type: ignore[misc]

    def test_has_access_token_requires_both_fields(self) -> None:
        assert not FireEagleConfig(consumer_key="k", consumer_secret="s").has_access_token
        assert not FireEagleConfig(
            consumer_key="k", consumer_secret="s", access_token_secret="x"
        ).has_access_token
        assert FireEagleConfig(
            consumer_key="k", consumer_secret="s", access_token="t", access_token_secret="x"
        ).has_access_token

    def test_secrets_not_in_repr(self) -> None:
        config = FireEagleConfig(
            consumer_key="k", consumer_secret="s", access_token="t", access_token_secret="hidden"
        )

        assert "hidden" not in repr(config)


class TestEndpoints:
    """Endpoint URLs are fixed by the service."""

    def test_default_urls(self) -> None:
        config = FireEagleConfig(consumer_key="k", consumer_secret="s")

        assert config.request_token_url == "https://fireeagle.yahooapis.com/oauth/request_token"
        assert config.authorization_url == "https://fireeagle.yahoo.net/oauth/authorize"
        assert config.access_token_url == "https://fireeagle.yahooapis.com/oauth/access_token"
        assert config.query_url == "https://fireeagle.yahooapis.com/api/0.1/user"
        assert config.update_url == "https://fireeagle.yahooapis.com/api/0.1/update"
        assert config.lookup_url == "https://fireeagle.yahooapis.com/api/0.1/lookup"

    def test_custom_hosts(self) -> None:
        config = FireEagleConfig(
            consumer_key="k",
            consumer_secret="s",
            api_base_url="http://localhost:8080",
            web_base_url="http://localhost:8081",
        )

        assert config.request_token_url == "http://localhost:8080/oauth/request_token"
        assert config.authorization_url == "http://localhost:8081/oauth/authorize"


class TestFromEnv:
    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIREEAGLE_CONSUMER_KEY", "env_key")
        monkeypatch.setenv("FIREEAGLE_CONSUMER_SECRET", "env_secret")
        monkeypatch.setenv("FIREEAGLE_ACCESS_TOKEN", "env_token")
        monkeypatch.setenv("FIREEAGLE_ACCESS_TOKEN_SECRET", "env_token_secret")

        config = FireEagleConfig.from_env()

        assert config.consumer_key == "env_key"
        assert config.consumer_secret == "env_secret"
        assert config.has_access_token

    def test_missing_env_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIREEAGLE_CONSUMER_KEY", "env_key")
        monkeypatch.delenv("FIREEAGLE_CONSUMER_SECRET", raising=False)

        with pytest.raises(ConfigurationError):
            FireEagleConfig.from_env()


class TestFromFile:
    def test_reads_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"consumer_key": "file_key", "consumer_secret": "file_secret"}))

        config = FireEagleConfig.from_file(path)

        assert config.consumer_key == "file_key"
        assert not config.has_access_token

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            FireEagleConfig.from_file(tmp_path / "absent.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to read"):
            FireEagleConfig.from_file(path)

    @pytest.mark.parametrize("content", ['["consumer_key"]', '"consumer_key"', "42", "null"])
    def test_non_object_json_raises(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "config.json"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            FireEagleConfig.from_file(path)

    def test_load_prefers_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("FIREEAGLE_CONSUMER_KEY", "env_key")
        monkeypatch.setenv("FIREEAGLE_CONSUMER_SECRET", "env_secret")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert FireEagleConfig.load().consumer_key == "env_key"

    def test_load_falls_back_to_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.delenv("FIREEAGLE_CONSUMER_KEY", raising=False)
        monkeypatch.delenv("FIREEAGLE_CONSUMER_SECRET", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        (tmp_path / "fireeagle").mkdir()
        (tmp_path / "fireeagle" / "config.json").write_text(
            json.dumps({"consumer_key": "file_key", "consumer_secret": "file_secret"})
        )

        assert FireEagleConfig.load().consumer_key == "file_key"
