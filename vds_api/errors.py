"""VDS control API client errors."""

import logging
import pprint
from enum import StrEnum
from http import HTTPStatus
from typing import Any

from requests import JSONDecodeError, RequestException, Response

from vds_api.constants import HTTP_ERROR_MESSAGE, MASKED_VALUE, SENSITIVE_PARAMS

logger = logging.getLogger(__name__)


class ErrorKind(StrEnum):
    """Stable taxonomy of VDS control API failures."""

    CRITICAL = "critical"
    VALIDATION = "validation"
    NOT_EXISTS = "not_exists"
    ALREADY_EXISTS = "already_exists"
    PROCESS_TIMEOUT = "process_timeout"
    JSON_DECODE = "json_decode"
    SYSTEM_USER = "system_user"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


RAW_CODE_KINDS = {
    1: ErrorKind.CRITICAL,
    2: ErrorKind.VALIDATION,
    3: ErrorKind.NOT_EXISTS,
    4: ErrorKind.ALREADY_EXISTS,
    5: ErrorKind.PROCESS_TIMEOUT,
    7: ErrorKind.JSON_DECODE,
    8: ErrorKind.SYSTEM_USER,
    9: ErrorKind.UNAVAILABLE,
}
JSON_DECODE_CODE = 7


def error_kind_for(code: int) -> ErrorKind:
    """Maps a raw service error code to its error kind."""
    return RAW_CODE_KINDS.get(code, ErrorKind.UNKNOWN)


class VDSError(Exception):
    """Base exception for VDS client errors."""


class OperationError(VDSError):
    """Failed VDS control API operation."""

    def __init__(
        self,
        kind: ErrorKind,
        code: int,
        message: str,
        name: str | None = None,
        status_code: int | None = None,
        command: str | None = None,
    ):
        self.kind = kind
        self.code = code
        self.message = message
        self.name = name
        self.status_code = status_code
        self.command = command
        super().__init__(self.message)

    def __str__(self) -> str:
        details = " ".join(part for part in (self.name, self.message) if part)
        return f"OperationError {self.kind} ({self.code}): {details}"


def mask_params(params: dict[str, Any]) -> dict[str, Any]:
    """Returns a copy of request params with password values hidden."""
    return {
        key: MASKED_VALUE if key in SENSITIVE_PARAMS or "password" in str(key).lower() else value
        for key, value in params.items()
    }


def extract_error(
    response: Response | None, transport_error: RequestException | None = None
) -> tuple[int, str | None, str]:
    """
    Extracts the error details of a failed request.

    The service error object in the response body wins, then a bare HTTP 500,
    then whatever the transport reported.

    Args:
        response: HTTP response, None when the transport got no response at all
        transport_error: Transport exception raised while sending the request

    Returns:
        Tuple of (code, name, message)
    """
    if response is not None:
        try:
            payload = response.json()
        except JSONDecodeError:
            payload = None

        service_error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(service_error, dict):
            try:
                code = int(service_error.get("code"))
            except (TypeError, ValueError):
                logger.warning("Malformed error code in response: %s", service_error)
            else:
                return code, service_error.get("name"), service_error.get("message") or ""

        if response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR:
            return int(HTTPStatus.INTERNAL_SERVER_ERROR), None, HTTP_ERROR_MESSAGE

    if transport_error is None:
        return 0, None, ""

    errno = transport_error.errno if isinstance(transport_error.errno, int) else 0
    return errno, None, str(transport_error)


def translate_error(
    code: int,
    message: str,
    name: str | None = None,
    status_code: int | None = None,
    command: str | None = None,
    params: dict[str, Any] | None = None,
) -> OperationError:
    """Maps a raw error code to an OperationError and logs it with its request context."""
    error = OperationError(
        error_kind_for(code),
        code,
        message,
        name=name,
        status_code=status_code,
        command=command,
    )
    logger.error("Error: %s", error)
    if command is not None:
        logger.error("Command: %s", command)
    if params is not None:
        logger.error("Params: %s", pprint.pformat(mask_params(params)))

    return error
