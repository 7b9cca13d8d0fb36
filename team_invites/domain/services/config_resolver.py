from __future__ import annotations

from typing import Any, List, Optional

from team_invites.domain.models.team import Team, FALLBACK_TEAM_ID, FALLBACK_TEAM_NAME
from team_invites.domain.services.team_service import TeamService
from team_invites.domain.exceptions import NoConfigAvailable, InvalidSelection


class ConfigResolver:
    """Picks the team whose credentials authorize an invite.

    Order: explicit team id, then the only stored team, then the environment
    fallback. The fallback is used only while the store is empty, so it never
    shadows a team the operator created.
    """

    def __init__(
        self,
        team_service: TeamService,
        fallback_token: Optional[str] = None,
        fallback_account_id: Optional[str] = None,
    ):
        self.team_service = team_service
        self.fallback_token = fallback_token
        self.fallback_account_id = fallback_account_id

    def fallback_team(self) -> Optional[Team]:
        if not self.fallback_token or not self.fallback_account_id:
            return None
        return Team(
            id=FALLBACK_TEAM_ID,
            name=FALLBACK_TEAM_NAME,
            token=self.fallback_token,
            account_id=self.fallback_account_id,
        )

    async def all_configs(self) -> List[Team]:
        teams = await self.team_service.list_teams()
        if teams:
            return teams

        fallback = self.fallback_team()
        return [fallback] if fallback else []

    async def current_config(self) -> Optional[Team]:
        configs = await self.all_configs()
        return configs[0] if configs else None

    async def resolve(self, team_id: Any = None) -> Team:
        configs = await self.all_configs()
        if not configs:
            raise NoConfigAvailable()

        if team_id is not None and team_id != "":
            selector = str(team_id)
            for team in configs:
                if team.id == selector:
                    return team

        if len(configs) == 1:
            return configs[0]

        raise InvalidSelection(team_id)
