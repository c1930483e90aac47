"""Backend connection state."""

from enum import StrEnum

from loguru import logger

from app.errors import BackendUnavailableError
from site_client import SiteClient


class ConnectionState(StrEnum):
    """Lifecycle of the backend handle."""

    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"


class Connection:
    """Owns the backend handle; reads and writes branch on its state."""

    def __init__(self, client_factory=SiteClient):
        self._factory = client_factory
        self._handle = None
        self._owned = False
        self.state = ConnectionState.CONNECTING
        self.error: Exception | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is ConnectionState.READY

    @property
    def handle(self):
        """Backend handle; raises BackendUnavailableError unless READY."""
        if not self.is_ready:
            raise BackendUnavailableError(f"Backend not available ({self.state})")
        return self._handle

    async def connect(self) -> ConnectionState:
        """Open a new handle. Failures are recorded, not raised."""
        self.state = ConnectionState.CONNECTING
        try:
            self._handle = await self._factory().__aenter__()
        except Exception as e:
            self.error = e
            self.state = ConnectionState.FAILED
            logger.error("Backend connection failed: {}", e)
            return self.state

        self._owned = True
        self.error = None
        self.state = ConnectionState.READY
        logger.info("Backend connection ready")
        return self.state

    def attach(self, handle) -> None:
        """Use an already-open handle."""
        self._handle = handle
        self._owned = False
        self.error = None
        self.state = ConnectionState.READY
        logger.debug("Backend handle attached: {}", type(handle).__name__)

    async def close(self) -> None:
        """Close an owned handle and go back to CONNECTING."""
        if self._handle is not None and self._owned:
            await self._handle.__aexit__(None, None, None)
        self._handle = None
        self._owned = False
        self.state = ConnectionState.CONNECTING
        logger.debug("Backend connection closed")
