from __future__ import annotations

import logging
from typing import Optional

import httpx

from team_invites.domain.ports.invite_client import InviteClientPort
from team_invites.domain.models.invite import InviteRequest, InviteResult
from team_invites.domain.exceptions import InviteTransportError

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class ChatGPTInviteAdapter(InviteClientPort):
    def __init__(
        self,
        base_url: str = "https://chat.openai.com",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self.logger = logging.getLogger(__name__)

    def invites_url(self, account_id: str) -> str:
        return f"{self.base_url}/backend-api/teams/{account_id}/invites"

    async def send_invites(self, request: InviteRequest, token: str, account_id: str) -> InviteResult:
        try:
            response = await self.client.post(
                self.invites_url(account_id),
                headers={
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                    "User-Agent": USER_AGENT,
                },
                json={
                    "emails": list(request.emails),
                    "role": request.role,
                    "resend": request.resend,
                },
            )

            if not response.is_success:
                self.logger.error(f"API Error ({response.status_code}): {response.text}")
                return InviteResult.rejected(response.status_code, response.text)

            return InviteResult.ok(response.json())

        # InvalidURL is not an HTTPError; ValueError covers a 2xx body that is not JSON
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise InviteTransportError(account_id, str(e) or type(e).__name__) from e

    async def aclose(self) -> None:
        await self.client.aclose()
