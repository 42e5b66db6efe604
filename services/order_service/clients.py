"""
HTTP client for the external user service.

The order service only needs to know whether a user exists, so the client
turns the user service's 404 into ``None``. Every other failure (5xx,
timeouts, refused connections) is raised to the caller untouched.
"""
import os
import httpx
import structlog
from .schemas import UserRecord

logger = structlog.get_logger(__name__)

USER_SERVICE_URL = os.getenv("USER_SERVICE_URL", "http://localhost:8081")
USER_SERVICE_TIMEOUT = float(os.getenv("USER_SERVICE_TIMEOUT", "10.0"))


class UserServiceClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or USER_SERVICE_URL).rstrip("/")
        self.timeout = USER_SERVICE_TIMEOUT if timeout is None else timeout
        self._transport = transport

    async def get_user_by_id(self, user_id: int) -> UserRecord | None:
        """Fetch a user record, or ``None`` when the user service answers 404.

        A successful reply with an empty or ``null`` body also counts as absence.

        Raises:
            httpx.HTTPStatusError: For any non-404 error status.
            httpx.TransportError: When the user service cannot be reached.
        """
        url = f"{self.base_url}/api/users/{user_id}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url)

        if resp.status_code == 404:
            logger.info("user_lookup_not_found", user_id=user_id)
            return None

        resp.raise_for_status()
        payload = resp.json() if resp.content.strip() else None
        if payload is None:
            logger.info("user_lookup_empty_body", user_id=user_id)
            return None
        return UserRecord.model_validate(payload)
