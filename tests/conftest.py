import pytest
import responses

from vds_api.client import VDSClient
from vds_api.config import VDSConfig

VDS_HOST = "vds.test.com"
VDS_PORT = 8443
BASE_URL = f"https://{VDS_HOST}:{VDS_PORT}/api/"


@pytest.fixture
def vds_config():
    return VDSConfig(host=VDS_HOST, port=VDS_PORT)


@pytest.fixture
def vds_client(vds_config):
    return VDSClient(vds_config)


@pytest.fixture
def vds_env(monkeypatch):
    monkeypatch.setenv("VDS_API_HOST", VDS_HOST)
    monkeypatch.setenv("VDS_API_PORT", str(VDS_PORT))
    monkeypatch.setenv("VDS_API_TIMEOUT", "15")


@pytest.fixture
def requests_mocker():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service_error():
    def _service_error(code, name="error", message="Error message"):
        return {"error": {"code": code, "name": name, "message": message}}

    return _service_error
