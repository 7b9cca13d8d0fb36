from abc import ABC, abstractmethod

from team_invites.domain.models.invite import InviteRequest, InviteResult


class InviteClientPort(ABC):
    @abstractmethod
    async def send_invites(self, request: InviteRequest, token: str, account_id: str) -> InviteResult:
        """Issue a single upstream invite call.

        Returns a failed ``InviteResult`` when the upstream answers with a
        non-success status. Raises ``InviteTransportError`` when the call
        cannot be completed.
        """
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release connections held by the client, if any."""
        return None
