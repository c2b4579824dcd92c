import errno
import socket

from await_ready.status import Status, StatusCode, status


# Address-family scoped failures. The other family may still reach the host.
FAMILY_UNREACHABLE_ERRNOS = {
    errno.EADDRNOTAVAIL: "EADDRNOTAVAIL",
    errno.EAFNOSUPPORT: "EAFNOSUPPORT",
    errno.ENETUNREACH: "ENETUNREACH",
}

PERMISSION_ERRNOS = {
    errno.EACCES: "EACCES",
    errno.EPERM: "EPERM",
}


def classify_connect_error(err: BaseException) -> Status:
    """Map a socket level exception raised while connecting onto the status taxonomy."""

    if isinstance(err, socket.gaierror):
        return status(
            StatusCode.ENOTFOUND,
            f"Socket cannot be opened: ENOTFOUND ({err.strerror or err})",
            cause=err,
        )

    error_number = getattr(err, "errno", None)

    if isinstance(err, TimeoutError) and error_number in (None, errno.ETIMEDOUT):
        return status(
            StatusCode.TIMEOUT,
            "Socket not open: ETIMEDOUT",
            cause=err,
        )

    if error_number == errno.ECONNREFUSED:
        return status(
            StatusCode.ECONNREFUSED,
            "Socket not open: ECONNREFUSED",
            cause=err,
        )

    if error_number in PERMISSION_ERRNOS:
        return status(
            StatusCode.EACCES,
            f"Socket not open: {PERMISSION_ERRNOS[error_number]}",
            cause=err,
        )

    if error_number == errno.ECONNRESET:
        # The server dropped us before the handshake finished, usually safe to try again.
        return status(
            StatusCode.ECONNRESET,
            "Socket not open: ECONNRESET",
            cause=err,
        )

    if error_number in FAMILY_UNREACHABLE_ERRNOS:
        return status(
            StatusCode.ENOTFOUND,
            f"Socket cannot be opened: {FAMILY_UNREACHABLE_ERRNOS[error_number]}",
            cause=err,
        )

    return status(
        StatusCode.UNKNOWN,
        f"Unknown error: {err}",
        cause=err,
    )
