import os
from dataclasses import dataclass

from vds_api.constants import CONNECTION_TIMEOUT, DEFAULT_PORT

HOST_ENV = "VDS_API_HOST"
PORT_ENV = "VDS_API_PORT"
TIMEOUT_ENV = "VDS_API_TIMEOUT"


class VDSConfigError(Exception):
    """Exception raised when VDS API configuration is invalid or missing."""


def validate_timeout(timeout: float) -> float:
    """Checks the request timeout is a positive number of seconds."""
    if isinstance(timeout, bool) or not isinstance(timeout, int | float) or not timeout > 0:
        raise VDSConfigError(f"Timeout must be greater than zero, got {timeout!r}")
    return timeout


@dataclass(frozen=True)
class VDSConfig:
    """VDS control API access configuration."""

    host: str
    port: int = DEFAULT_PORT
    timeout: float = CONNECTION_TIMEOUT

    def __post_init__(self):
        if not self.host:
            raise VDSConfigError("VDS API host is not defined")
        validate_timeout(self.timeout)

    @classmethod
    def from_env(cls) -> "VDSConfig":
        """Create VDSConfig from environment variables."""
        host = os.environ.get(HOST_ENV)
        if not host:
            raise VDSConfigError(f"Missing required VDS configuration key: {HOST_ENV}")

        try:
            port = int(os.environ.get(PORT_ENV, DEFAULT_PORT))
            timeout = float(os.environ.get(TIMEOUT_ENV, CONNECTION_TIMEOUT))
        except ValueError as err:
            raise VDSConfigError(f"Invalid VDS configuration value: {err}") from err

        return cls(host=host, port=port, timeout=timeout)


_CONFIG = None


def get_config() -> VDSConfig:
    """Get configuration."""
    global _CONFIG  # noqa: PLW0603 WPS420
    if not _CONFIG:
        _CONFIG = VDSConfig.from_env()
    return _CONFIG
