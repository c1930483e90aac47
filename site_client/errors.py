"""Backend errors."""


class BackendError(Exception):
    """Backend rejected a request (authorization, not found, conflict...)."""

    def __init__(self, status_code: int, detail: str = "Backend error"):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")
