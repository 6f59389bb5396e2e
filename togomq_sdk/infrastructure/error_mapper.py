"""Translate transport failures into ``TogoMQError`` kinds."""

import grpc

from ..domain.enums import ErrorKind
from ..domain.exceptions import TogoMQError

AUTH_STATUS_CODES = frozenset({grpc.StatusCode.UNAUTHENTICATED, grpc.StatusCode.PERMISSION_DENIED})


def map_transport_error(error: BaseException, kind: ErrorKind, operation: str) -> TogoMQError:
    """Wrap ``error`` as a ``TogoMQError`` of ``kind``.

    Args:
        error: The failure raised by the transport or while building a request
        kind: Kind to use unless the status says the credentials were rejected
        operation: Short description used in the message, e.g. "publish messages"

    Returns:
        ``error`` itself if it already is a ``TogoMQError``, otherwise a new
        error with ``error`` as its cause
    """
    if isinstance(error, TogoMQError):
        return error

    if isinstance(error, grpc.RpcError):
        code = _status_code(error)
        if code in AUTH_STATUS_CODES:
            kind = ErrorKind.AUTH
        details = {"status": code.name} if code is not None else {}
        return TogoMQError(
            f"Failed to {operation}: {_status_details(error)}",
            kind,
            cause=error,
            details=details,
        )

    return TogoMQError(f"Error while trying to {operation}: {error}", kind, cause=error)


def _status_code(error: grpc.RpcError) -> grpc.StatusCode | None:
    # RpcError raised by grpc is also a grpc.Call, but the base class has no code()
    code = getattr(error, "code", None)
    return code() if callable(code) else None


def _status_details(error: grpc.RpcError) -> str:
    details = getattr(error, "details", None)
    if callable(details):
        return details() or str(error)
    return str(error)
