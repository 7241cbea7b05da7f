from enum import StrEnum

CONNECTION_TIMEOUT = 10
DEFAULT_PORT = 443
USER_AGENT = "vds-api-client/1.0"

ASYNC_PARAM = "async"

STATUS_COMMAND = "task/status/{task_id}"
ADD_COMMAND = "vds/add/base/{name}"
REINSTALL_COMMAND = "vds/reinstall/{name}"
MODIFY_COMMAND = "vds/modify/{name}"
START_COMMAND = "vds/start/{name}"
STOP_COMMAND = "vds/stop/{name}"
RESTART_COMMAND = "vds/restart/{name}"
DELETE_COMMAND = "vds/delete/{name}"
SHOW_COMMAND = "vds/show/{name}"

HTTP_ERROR_MESSAGE = "HTTP Error"
MASKED_VALUE = "******"
SENSITIVE_PARAMS = ("root_password", "vnc_password")


class HttpMethod(StrEnum):
    """Request methods accepted by the control API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ModifyParam(StrEnum):
    """Parameters accepted by the modify command."""

    MEMORY = "memory"
    HDD_QUOTA = "hdd_quota"
    CPU_COUNT = "cpu_count"
    ROOT_PASSWORD = "root_password"  # noqa: S105
    VNC_PASSWORD = "vnc_password"  # noqa: S105
