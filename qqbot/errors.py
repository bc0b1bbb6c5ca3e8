"""Errors raised by the CQHTTP API clients."""


class ApiError(Exception):
    """CQHTTP answered an action with a non-ok status."""

    def __init__(self, action: str, status: str, retcode: int, message: str = "") -> None:
        detail = f" ({message})" if message else ""
        super().__init__(f"{action} failed: {status} {retcode}{detail}")
        self.action = action
        self.status = status
        self.retcode = retcode
