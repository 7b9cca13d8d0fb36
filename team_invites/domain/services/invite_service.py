from __future__ import annotations

import logging

from team_invites.domain.models.invite import InviteRequest, InviteResult
from team_invites.domain.models.team import Team
from team_invites.domain.ports.invite_client import InviteClientPort
from team_invites.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def validate_emails(emails) -> list[str]:
    if not emails or not isinstance(emails, list):
        raise ValidationError("Emails array is required")
    return emails


class InviteService:
    def __init__(self, client: InviteClientPort):
        self.client = client

    async def dispatch(self, request: InviteRequest, team: Team) -> InviteResult:
        """Single attempt, no retry. Transport failures propagate to the caller."""
        validate_emails(request.emails)

        logger.info(
            "Sending invites to %d users for account %s (team=%s)",
            len(request.emails),
            team.account_id,
            team.name,
        )
        return await self.client.send_invites(request, team.token, team.account_id)
