import pytest

import ezjson
from ezjson import EzjsonConfig, LookupOptions
from ezjson.testing import ezjson_test_env


def test_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("EZJSON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EZJSON_RICH_LOGGING", raising=False)
    monkeypatch.delenv("EZJSON_ERROR_ON_NULL", raising=False)

    config = EzjsonConfig()

    assert config.log_level == "WARNING"
    assert config.rich_logging is True
    assert config.error_on_null is False
    assert config.default_lookup_options() == LookupOptions()


def test_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("EZJSON_LOG_LEVEL", "debug")
    monkeypatch.setenv("EZJSON_RICH_LOGGING", "no")
    monkeypatch.setenv("EZJSON_ERROR_ON_NULL", "1")

    config = EzjsonConfig()

    assert config.log_level == "DEBUG"
    assert config.rich_logging is False
    assert config.default_lookup_options() == LookupOptions(error_on_null=True)


@pytest.mark.parametrize(
    ("name", "value"),
    [("EZJSON_ERROR_ON_NULL", "maybe"), ("EZJSON_LOG_LEVEL", "LOUD")],
)
def test_config_rejects_invalid_values(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        EzjsonConfig()


def test_test_env_restores_config() -> None:
    before = ezjson.EZJSON_CONFIG.error_on_null

    with ezjson_test_env():
        ezjson.EZJSON_CONFIG.error_on_null = not before

    assert ezjson.EZJSON_CONFIG.error_on_null is before


def test_load_env_reads_dotenv_file(tmp_path, monkeypatch, ezjson_config) -> None:
    monkeypatch.setenv("EZJSON_ERROR_ON_NULL", "false")
    env_file = tmp_path / ".env"
    env_file.write_text("EZJSON_ERROR_ON_NULL=true\n")

    assert ezjson.load_env(env_file, override=True) is True
    assert ezjson_config.error_on_null is True

    doc = ezjson.decode_string('{"a": null}')
    with pytest.raises(ezjson.NullValueError):
        ezjson.get_property(doc, "a")
