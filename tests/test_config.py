"""Tests for environment-driven configuration resolution."""

import pytest
from pydantic import ValidationError

from diveseeks.config import AppConfig, resolve_app_config

DEFAULTS = {
    "port": 3000,
    "node_env": "development",
    "max_file_size": 10485760,
    "upload_dest": "./uploads",
    "throttle_ttl": 60,
    "throttle_limit": 10,
}


def test_empty_environment_yields_defaults():
    config = resolve_app_config({})

    assert config.model_dump() == DEFAULTS


def test_values_are_read_from_environment():
    config = resolve_app_config(
        {
            "PORT": "8080",
            "NODE_ENV": "production",
            "MAX_FILE_SIZE": "2048",
            "UPLOAD_DEST": "/var/data/uploads",
            "THROTTLE_TTL": "30",
            "THROTTLE_LIMIT": "100",
        }
    )

    assert config.port == 8080
    assert config.node_env == "production"
    assert config.max_file_size == 2048
    assert config.upload_dest == "/var/data/uploads"
    assert config.throttle_ttl == 30
    assert config.throttle_limit == 100


@pytest.mark.parametrize("port", ["1", "443", "3001", "65535"])
def test_valid_port_is_used_exactly(port: str):
    assert resolve_app_config({"PORT": port}).port == int(port)


@pytest.mark.parametrize(
    ("key", "field"),
    [
        ("PORT", "port"),
        ("MAX_FILE_SIZE", "max_file_size"),
        ("THROTTLE_TTL", "throttle_ttl"),
        ("THROTTLE_LIMIT", "throttle_limit"),
    ],
)
@pytest.mark.parametrize("raw", ["abc", "", "0", "12.5", "  ", "1e3"])
def test_malformed_or_zero_number_falls_back_to_default(key, field, raw):
    config = resolve_app_config({key: raw})

    assert getattr(config, field) == DEFAULTS[field]


@pytest.mark.parametrize("key", ["NODE_ENV", "UPLOAD_DEST"])
def test_empty_string_falls_back_to_default(key: str):
    config = resolve_app_config({key: ""})

    assert config.model_dump() == DEFAULTS


def test_no_range_validation_is_applied():
    config = resolve_app_config({"PORT": "-1", "THROTTLE_LIMIT": "-5"})

    assert config.port == -1
    assert config.throttle_limit == -5


def test_surrounding_whitespace_is_ignored_for_numbers():
    assert resolve_app_config({"PORT": " 4000 "}).port == 4000


@pytest.mark.parametrize("raw", ["1_000", "٣٠٠٠", "8 080"])
def test_only_plain_ascii_digits_are_numbers(raw: str):
    assert resolve_app_config({"PORT": raw}).port == DEFAULTS["port"]


def test_explicit_sign_is_accepted():
    assert resolve_app_config({"PORT": "+8080"}).port == 8080


def test_unrelated_variables_are_ignored():
    config = resolve_app_config({"DATABASE_URL": "postgres://x", "PORT": "5000"})

    assert config.port == 5000


def test_resolution_is_idempotent():
    environ = {"PORT": "9000", "NODE_ENV": "staging", "MAX_FILE_SIZE": "oops"}

    first = resolve_app_config(environ)
    second = resolve_app_config(environ)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_config_is_immutable():
    config = resolve_app_config({})

    with pytest.raises(ValidationError):
        config.port = 1  # type: ignore[misc]


def test_process_environment_is_read(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep a developer .env out of the way
    monkeypatch.setenv("PORT", "7000")
    monkeypatch.setenv("THROTTLE_TTL", "not-a-number")
    monkeypatch.delenv("NODE_ENV", raising=False)

    config = resolve_app_config()

    assert config.port == 7000
    assert config.throttle_ttl == 60
    assert config.node_env == "development"


def test_dotenv_file_is_read(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("UPLOAD_DEST", raising=False)
    (tmp_path / ".env").write_text("UPLOAD_DEST=/srv/uploads\n", encoding="utf-8")

    assert resolve_app_config().upload_dest == "/srv/uploads"


def test_direct_construction_applies_same_fallbacks():
    config = AppConfig(
        port=0,
        node_env="",
        max_file_size="junk",  # type: ignore[arg-type]
    )

    assert config.port == 3000
    assert config.node_env == "development"
    assert config.max_file_size == 10485760


def test_environment_flags():
    assert resolve_app_config({}).is_development
    production = resolve_app_config({"NODE_ENV": "production"})
    assert production.is_production
    assert not production.is_development
    staging = resolve_app_config({"NODE_ENV": "staging"})
    assert not staging.is_production
    assert not staging.is_development
