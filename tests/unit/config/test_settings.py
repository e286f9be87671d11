"""Unit tests for config settings & validation."""

import dataclasses

import pytest

from maib_mia.application.endpoints import DEFAULT_BASE_URL, SANDBOX_BASE_URL
from maib_mia.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MiaSettings,
    MissingRequiredSettingError,
)

_ENV_KEYS = (
    "MAIB_MIA_CLIENT_ID",
    "MAIB_MIA_CLIENT_SECRET",
    "MAIB_MIA_SIGNATURE_KEY",
    "MAIB_MIA_BASE_URL",
    "MAIB_MIA_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so keys written by load_dotenv are removed on teardown
    for key in _ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


# ---------------------------------------------------------------------------
# MiaSettings
# ---------------------------------------------------------------------------


class TestMiaSettings:
    def test_prefix_is_not_a_field(self) -> None:
        names = [f.name for f in dataclasses.fields(MiaSettings)]
        assert names == ["client_id", "client_secret", "signature_key", "base_url", "timeout"]
        assert MiaSettings._prefix == "MAIB_MIA"

    def test_credentials_are_positional(self) -> None:
        settings = MiaSettings("c", "s")
        assert (settings.client_id, settings.client_secret) == ("c", "s")

    def test_defaults(self) -> None:
        settings = MiaSettings(client_id="c", client_secret="s")
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0
        assert settings.signature_key == ""
        assert settings.is_sandbox is False

    def test_sandbox_flag(self) -> None:
        assert MiaSettings(client_id="c", client_secret="s", base_url=SANDBOX_BASE_URL).is_sandbox is True

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            MiaSettings(client_id="c", client_secret="s", base_url="ftp://x")
        assert exc_info.value.field_name == "base_url"
        assert exc_info.value.message == "base_url='ftp://x' must be an http(s) URL"

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        with pytest.raises(InvalidSettingValueError):
            MiaSettings(client_id="c", client_secret="s", timeout=timeout)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_all_fields(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "client")
        monkeypatch.setenv("MAIB_MIA_CLIENT_SECRET", "secret")
        monkeypatch.setenv("MAIB_MIA_SIGNATURE_KEY", "sig")
        monkeypatch.setenv("MAIB_MIA_BASE_URL", SANDBOX_BASE_URL)
        monkeypatch.setenv("MAIB_MIA_TIMEOUT", "12.5")
        settings = EnvSettingsLoader().load(MiaSettings)
        assert settings.client_id == "client"
        assert settings.client_secret == "secret"
        assert settings.signature_key == "sig"
        assert settings.base_url == SANDBOX_BASE_URL
        assert settings.timeout == 12.5

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "client")
        monkeypatch.setenv("MAIB_MIA_CLIENT_SECRET", "secret")
        settings = EnvSettingsLoader().load(MiaSettings)
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "client")
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(MiaSettings)
        err = exc_info.value
        assert err.env_key == "MAIB_MIA_CLIENT_SECRET"
        assert err.field_name == "client_secret"
        assert err.message == "MAIB_MIA_CLIENT_SECRET is not set (required for 'client_secret')"
        assert err.log_fields()["env_key"] == "MAIB_MIA_CLIENT_SECRET"

    def test_bad_float_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "client")
        monkeypatch.setenv("MAIB_MIA_CLIENT_SECRET", "secret")
        monkeypatch.setenv("MAIB_MIA_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(MiaSettings)

    def test_invalid_value_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "client")
        monkeypatch.setenv("MAIB_MIA_CLIENT_SECRET", "secret")
        monkeypatch.setenv("MAIB_MIA_TIMEOUT", "0")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(MiaSettings)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            "MAIB_MIA_CLIENT_ID=file-client\n"
            "MAIB_MIA_CLIENT_SECRET=file-secret\n"
            "MAIB_MIA_SIGNATURE_KEY=file-sig\n"
        )
        settings = DotenvSettingsLoader(str(env_file)).load(MiaSettings)
        assert settings.client_id == "file-client"
        assert settings.signature_key == "file-sig"

    def test_existing_env_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("MAIB_MIA_CLIENT_ID=file-client\nMAIB_MIA_CLIENT_SECRET=file-secret\n")
        monkeypatch.setenv("MAIB_MIA_CLIENT_ID", "env-client")
        settings = DotenvSettingsLoader(str(env_file)).load(MiaSettings)
        assert settings.client_id == "env-client"
