from abc import ABC, abstractmethod
from typing import List

from team_invites.domain.models.team import Team


class TeamRepositoryPort(ABC):
    """Durable key-value storage of teams, keyed by team id."""

    @abstractmethod
    def list_teams(self) -> List[Team]:
        pass

    @abstractmethod
    def put_team(self, team: Team) -> None:
        """Create or fully replace the team stored under ``team.id``."""
        pass

    @abstractmethod
    def delete_team(self, team_id: str) -> None:
        pass
