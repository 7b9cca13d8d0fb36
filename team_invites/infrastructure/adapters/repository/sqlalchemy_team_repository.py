from __future__ import annotations

from typing import List

from sqlalchemy.orm import sessionmaker

from team_invites.domain.ports.team_repository import TeamRepositoryPort
from team_invites.domain.models.team import Team
from team_invites.infrastructure.persistence.tables import KvEntryTable, TEAMS_NAMESPACE


class SqlAlchemyTeamRepository(TeamRepositoryPort):
    def __init__(self, session_factory: sessionmaker, namespace: str = TEAMS_NAMESPACE):
        self.session_factory = session_factory
        self.namespace = namespace

    def list_teams(self) -> List[Team]:
        with self.session_factory() as session:
            rows = session.query(KvEntryTable).filter_by(namespace=self.namespace).all()
            return [Team.from_dict(row.value) for row in rows]

    def put_team(self, team: Team) -> None:
        with self.session_factory() as session:
            session.merge(
                KvEntryTable(namespace=self.namespace, key=team.id, value=team.to_dict())
            )
            session.commit()

    def delete_team(self, team_id: str) -> None:
        with self.session_factory() as session:
            session.query(KvEntryTable).filter_by(namespace=self.namespace, key=team_id).delete()
            session.commit()
