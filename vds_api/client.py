"""VDS control API client."""

import logging
import threading
from http import HTTPStatus
from typing import Any

import requests

from vds_api.config import VDSConfig, get_config, validate_timeout
from vds_api.constants import (
    ADD_COMMAND,
    ASYNC_PARAM,
    DELETE_COMMAND,
    MODIFY_COMMAND,
    REINSTALL_COMMAND,
    RESTART_COMMAND,
    SHOW_COMMAND,
    START_COMMAND,
    STATUS_COMMAND,
    STOP_COMMAND,
    USER_AGENT,
    HttpMethod,
    ModifyParam,
)
from vds_api.errors import (
    JSON_DECODE_CODE,
    ErrorKind,
    OperationError,
    extract_error,
    translate_error,
)
from vds_api.models import Quota

logger = logging.getLogger(__name__)


class VDSClient(requests.Session):
    """
    Client to manage VDS machines through the hosting control API.

    Every call is a single blocking request. Mutating commands run in the
    background on the service side unless ``async`` is set to False, and
    return a task that can be checked with :meth:`status`.

    Host and port are fixed for the lifetime of the client. The timeout may be
    changed at any time; the new value applies to requests dispatched after
    the change.
    """

    def __init__(self, config: VDSConfig):
        super().__init__()
        self._host = config.host
        self._port = config.port
        self._timeout = config.timeout
        self._timeout_lock = threading.Lock()
        self.headers.update({
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        })

    @property
    def host(self) -> str:
        """Control API host."""
        return self._host

    @property
    def port(self) -> int:
        """Control API port."""
        return self._port

    @property
    def timeout(self) -> float:
        """Request timeout in seconds."""
        with self._timeout_lock:
            return self._timeout

    @timeout.setter
    def timeout(self, timeout: float) -> None:
        validate_timeout(timeout)
        with self._timeout_lock:
            self._timeout = timeout

    def set_timeout(self, timeout: float) -> None:
        """Sets the timeout used by subsequent requests."""
        self.timeout = timeout

    def build_request(self, command: str) -> str:
        """
        Builds the request URL for a command.

        Args:
            command: Command path, for example ``vds/show/some-name``

        Returns:
            URL such as https://some.host:443/api/vds/show/some-name
        """
        return f"https://{self._host}:{self._port}/api/{command}"

    def request(self, method: str, url: str, *args, **kwargs):
        """Makes HTTP request, url being the command path."""
        url = self.build_request(url)
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, *args, **kwargs)

    def send_request(
        self,
        command: str,
        method: HttpMethod,
        params: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Sends a command to the control API.

        Args:
            command: Command path
            method: HTTP method
            params: Request parameters, sent as JSON body whatever the method
            timeout: Timeout override for this request only

        Returns:
            The ``data`` field of the response

        Raises:
            OperationError: The request failed
        """
        params = dict(params or {})
        params.setdefault(ASYNC_PARAM, True)
        timeout = self.timeout if timeout is None else validate_timeout(timeout)

        try:
            response = self.request(method, command, json=params, timeout=timeout)
        except requests.RequestException as err:
            code, name, message = extract_error(None, err)
            raise translate_error(code, message, name=name, command=command, params=params) from err

        if response.status_code == HTTPStatus.OK:
            try:
                payload = response.json()
            except requests.JSONDecodeError as err:
                raise translate_error(
                    JSON_DECODE_CODE,
                    f"Malformed response: {response.text[:200]}",
                    status_code=response.status_code,
                    command=command,
                    params=params,
                ) from err
            return payload.get("data") if isinstance(payload, dict) else None

        code, name, message = extract_error(response)
        raise translate_error(
            code,
            message,
            name=name,
            status_code=response.status_code,
            command=command,
            params=params,
        )

    def status(self, task_id: str) -> Any:
        """
        Gets the status of an asynchronous operation.

        Args:
            task_id: Task id returned by the asynchronous command
        """
        return self.send_request(
            STATUS_COMMAND.format(task_id=task_id), HttpMethod.GET, {ASYNC_PARAM: False}
        )

    def add(
        self,
        name: str,
        description: str,
        distributive: str,
        arch: str,
        quota: Quota | dict,
    ) -> Any:
        """
        Adds a new VDS.

        Args:
            name: VDS name
            description: VDS description
            distributive: Distributive to install
            arch: Architecture, not sent to the service
            quota: Quota or mapping with cpu_count, hdd_quota (bytes) and memory (bytes)
        """
        # TODO: send arch once the add endpoint is confirmed to accept it
        if not isinstance(quota, Quota):
            quota = Quota.from_dict(quota)
        params = {
            "description": description,
            "distributive": distributive,
            **quota.to_api_dict(),
        }
        return self.send_request(ADD_COMMAND.format(name=name), HttpMethod.POST, params)

    def reinstall(self, name: str, distributive: str, arch: str) -> Any:
        """Reinstalls the VDS with the given distributive."""
        return self.send_request(
            REINSTALL_COMMAND.format(name=name),
            HttpMethod.PUT,
            {"distributive": distributive, "arch": arch},
        )

    def modify(self, name: str, params: dict[str, Any]) -> Any:
        """
        Modifies VDS parameters.

        Args:
            name: VDS name
            params: Any subset of memory (bytes), hdd_quota (bytes), cpu_count,
                root_password and vnc_password
        """
        unexpected = sorted(set(params) - set(ModifyParam) - {ASYNC_PARAM}, key=str)
        if unexpected:
            logger.warning("Unexpected parameters to modify VDS %s: %s", name, unexpected)
        return self.send_request(MODIFY_COMMAND.format(name=name), HttpMethod.PUT, params)

    def start(self, name: str) -> Any:
        """Starts the VDS."""
        return self.send_request(START_COMMAND.format(name=name), HttpMethod.PUT)

    def stop(self, name: str) -> Any:
        """Stops the VDS."""
        return self.send_request(STOP_COMMAND.format(name=name), HttpMethod.PUT)

    def restart(self, name: str, force: bool = False) -> Any:
        """Restarts the VDS, forcibly if requested."""
        return self.send_request(
            RESTART_COMMAND.format(name=name), HttpMethod.PUT, {"force": force}
        )

    def delete(self, name: str) -> Any:
        """Deletes the VDS. A VDS that does not exist counts as deleted."""
        try:
            return self.send_request(DELETE_COMMAND.format(name=name), HttpMethod.DELETE)
        except OperationError as error:
            if error.kind != ErrorKind.NOT_EXISTS:
                raise
            logger.info("VDS %s does not exist, nothing to delete", name)
            return None

    def show(self, name: str) -> dict | None:
        """
        Gets VDS details.

        Returns:
            VDS details, None if the VDS does not exist
        """
        try:
            return self.send_request(
                SHOW_COMMAND.format(name=name), HttpMethod.GET, {ASYNC_PARAM: False}
            )
        except OperationError as error:
            if error.kind != ErrorKind.NOT_EXISTS:
                raise
            return None


class _VDSClientFactory:
    """Factory for VDS client singleton."""

    _instance: VDSClient | None = None

    @classmethod
    def get_client(cls) -> VDSClient:
        """Get VDS client singleton instance."""
        if cls._instance is not None:
            return cls._instance

        cls._instance = VDSClient(get_config())
        return cls._instance


def get_vds_client() -> VDSClient:
    """Get VDS client singleton instance."""
    return _VDSClientFactory.get_client()
