from typing import Any, Mapping

from ..models.errors import RequestError

_ERROR_SIGNAL_KEYS = ("code", "message", "messageCode")


def check_for_errors(data: Any) -> Any:
    """Raise ``RequestError`` if a decoded JSON body carries an ``error`` object.

    Args:
        data: The decoded json/geojson response.

    Returns:
        The same ``data``, untouched, when there is no error to report.

    Raises:
        RequestError: If ``data["error"]`` holds a code or a message.
    """
    if not isinstance(data, Mapping):
        return data

    error = data.get("error")
    if not isinstance(error, Mapping):
        return data
    if not any(error.get(key) is not None for key in _ERROR_SIGNAL_KEYS):
        return data

    raise RequestError(
        message=error.get("message"),
        code=error.get("code"),
        response=data,
        message_code=error.get("messageCode"),
        details=error.get("details"),
    )
