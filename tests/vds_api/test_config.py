import pytest

from vds_api import config as config_module
from vds_api.config import VDSConfig, VDSConfigError, get_config, validate_timeout
from vds_api.constants import CONNECTION_TIMEOUT, DEFAULT_PORT


def test_config_defaults():
    result = VDSConfig(host="vds.test.com")

    assert result.port == DEFAULT_PORT
    assert result.timeout == CONNECTION_TIMEOUT


def test_config_is_immutable():
    config = VDSConfig(host="vds.test.com")

    with pytest.raises(AttributeError):
        config.host = "other.test.com"  # type: ignore[misc]


def test_config_requires_host():
    with pytest.raises(VDSConfigError, match="host is not defined"):
        VDSConfig(host="")


@pytest.mark.parametrize("timeout", [0, -1, None, float("nan"), True, "10"])
def test_config_rejects_non_positive_timeout(timeout):
    with pytest.raises(VDSConfigError, match="Timeout must be greater than zero"):
        VDSConfig(host="vds.test.com", timeout=timeout)


def test_validate_timeout_returns_value():
    result = validate_timeout(2.5)

    assert result == 2.5


def test_from_env_with_all_values(vds_env):
    result = VDSConfig.from_env()

    assert result.host == "vds.test.com"
    assert result.port == 8443
    assert result.timeout == 15


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("VDS_API_HOST", "vds.test.com")
    monkeypatch.delenv("VDS_API_PORT", raising=False)
    monkeypatch.delenv("VDS_API_TIMEOUT", raising=False)

    result = VDSConfig.from_env()

    assert result.port == DEFAULT_PORT
    assert result.timeout == CONNECTION_TIMEOUT


def test_from_env_error_when_host_missing(monkeypatch):
    monkeypatch.delenv("VDS_API_HOST", raising=False)

    with pytest.raises(VDSConfigError, match="Missing required VDS configuration key"):
        VDSConfig.from_env()


@pytest.mark.parametrize("timeout", ["soon", "nan", "0", "-5"])
def test_from_env_error_when_timeout_invalid(timeout, vds_env, monkeypatch):
    monkeypatch.setenv("VDS_API_TIMEOUT", timeout)

    with pytest.raises(VDSConfigError):
        VDSConfig.from_env()


def test_from_env_error_when_port_invalid(vds_env, monkeypatch):
    monkeypatch.setenv("VDS_API_PORT", "https")

    with pytest.raises(VDSConfigError, match="Invalid VDS configuration value"):
        VDSConfig.from_env()


def test_get_config_is_cached(vds_env, monkeypatch):
    monkeypatch.setattr(config_module, "_CONFIG", None)

    result = get_config()

    assert result is get_config()
    assert result.host == "vds.test.com"
