from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import List
from uuid import uuid4

from team_invites.domain.models.team import Team
from team_invites.domain.ports.team_repository import TeamRepositoryPort
from team_invites.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def name_sort_key(team: Team) -> tuple[str, str]:
    # case-insensitive first, lowercase before uppercase on ties ("alpha" < "Alpha" < "Beta")
    name = team.name or ""
    return name.casefold(), name.swapcase()


class TeamService:
    """Team store. Every call goes straight to the repository, there is no cache."""

    def __init__(self, repository: TeamRepositoryPort):
        self.repository = repository

    async def list_teams(self) -> List[Team]:
        teams = await asyncio.to_thread(self.repository.list_teams)
        return sorted(teams, key=name_sort_key)

    async def save_team(self, team: Team) -> Team:
        if not team.token or not team.account_id:
            raise ValidationError("Token and Account ID are required")

        if not team.id:
            team = dataclasses.replace(team, id=str(uuid4()))
            logger.info("Creating team %s (%s)", team.id, team.name)

        await asyncio.to_thread(self.repository.put_team, team)
        return team

    async def delete_team(self, team_id: str) -> None:
        await asyncio.to_thread(self.repository.delete_team, team_id)
        logger.info("Deleted team %s", team_id)
