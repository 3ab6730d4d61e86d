import json

import pytest

from client_config import DEFAULT_URL, DEFAULT_ZONE
from config_loader import ConfigError, load_client_config
from models import ClientConfig


# ---------------------- Fixtures ----------------------

@pytest.fixture
def write_config(tmp_path):
    def _write(document):
        path = tmp_path / "eureka_client.json"
        path.write_text(json.dumps(document) if not isinstance(document, str) else document)
        return str(path)
    return _write


# ---------------------- Tests ----------------------

def test_missing_file_uses_defaults(tmp_path):
    config = load_client_config(str(tmp_path / "nope.json"))

    assert config.serviceUrl == {DEFAULT_ZONE: DEFAULT_URL}
    assert config.region == "us-east-1"


def test_flat_document_is_loaded(write_config):
    path = write_config({
        "region": "eu-west-1",
        "serviceUrl": {"eu-west-1a": "http://a/,http://b/"},
        "availabilityZones": {"eu-west-1": "eu-west-1a,eu-west-1b"},
        "registryFetchIntervalSeconds": 10,
    })

    config = load_client_config(path)

    assert config.region == "eu-west-1"
    assert config.registryFetchIntervalSeconds == 10
    assert config.get_availability_zones("eu-west-1") == ["eu-west-1a", "eu-west-1b"]
    assert config.get_eureka_server_service_urls("eu-west-1a") == ["http://a/", "http://b/"]
    assert config.get_eureka_server_service_urls("eu-west-1b") == [DEFAULT_URL]


def test_nested_document_is_unwrapped(write_config):
    path = write_config({"eureka": {"client": {"fetchRegistry": False}}})

    config = load_client_config(path)

    assert config.should_fetch_registry() is False


def test_unknown_keys_are_ignored(write_config):
    path = write_config({"doesNotExist": 1, "disableDelta": True})

    config = load_client_config(path)

    assert config.should_disable_delta() is True


def test_invalid_json_raises_config_error(write_config):
    path = write_config("{ kein json")

    with pytest.raises(ConfigError):
        load_client_config(path)


def test_non_object_document_raises_config_error(write_config):
    path = write_config(["a", "b"])

    with pytest.raises(ConfigError):
        load_client_config(path)


def test_invalid_value_raises_config_error(write_config):
    path = write_config({"eurekaServerTotalConnections": "viele"})

    with pytest.raises(ConfigError):
        load_client_config(path)


def test_environment_overrides_file_values(write_config, monkeypatch):
    path = write_config({"registryFetchIntervalSeconds": 10})
    monkeypatch.setenv("EUREKA_CLIENT_REGISTRYFETCHINTERVALSECONDS", "15")
    monkeypatch.setenv("eureka_client_gzipcontent", "false")
    monkeypatch.setenv("EUREKA_CLIENT_REGION", "ap-south-1")

    config = load_client_config(path)

    assert config.registryFetchIntervalSeconds == 15
    assert config.should_gzip_content() is False
    assert config.get_region() == "ap-south-1"


def test_environment_sets_map_fields_from_json(monkeypatch, tmp_path):
    monkeypatch.setenv("EUREKA_CLIENT_AVAILABILITYZONES", '{"us-east-1": "us-east-1a,us-east-1b"}')

    config = load_client_config(str(tmp_path / "nope.json"))

    assert config.get_availability_zones("us-east-1") == ["us-east-1a", "us-east-1b"]


def test_environment_map_that_is_not_json_raises_config_error(monkeypatch, tmp_path):
    monkeypatch.setenv("EUREKA_CLIENT_SERVICEURL", "http://x/")

    with pytest.raises(ConfigError):
        load_client_config(str(tmp_path / "nope.json"))


def test_invalid_environment_value_raises_config_error(monkeypatch, tmp_path):
    monkeypatch.setenv("EUREKA_CLIENT_EUREKASERVERREADTIMEOUTSECONDS", "lang")

    with pytest.raises(ConfigError):
        load_client_config(str(tmp_path / "nope.json"))


def test_eureka_server_url_sets_default_zone(write_config, monkeypatch):
    path = write_config({"serviceUrl": {"z1": "http://z1/"}})
    monkeypatch.setenv("EUREKA_SERVER_URL", "http://eureka:8761/eureka/")

    config = load_client_config(path)

    assert config.serviceUrl == {DEFAULT_ZONE: "http://eureka:8761/eureka/", "z1": "http://z1/"}


def test_config_file_from_environment(write_config, monkeypatch):
    path = write_config({"disableDelta": True})
    monkeypatch.setenv("EUREKA_CLIENT_CONFIG_FILE", path)

    config = load_client_config()

    assert config.should_disable_delta() is True


def test_proxy_password_from_environment_stays_secret(monkeypatch, tmp_path):
    monkeypatch.setenv("EUREKA_CLIENT_PROXYPASSWORD", "s3cret")

    config = load_client_config(str(tmp_path / "nope.json"))

    assert config.proxyPassword.get_secret_value() == "s3cret"
    assert "s3cret" not in repr(config)


def test_plain_client_config_ignores_environment(monkeypatch):
    monkeypatch.setenv("EUREKA_CLIENT_REGION", "ap-south-1")

    assert ClientConfig().region == "us-east-1"
