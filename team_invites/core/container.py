from __future__ import annotations

from typing import Optional

from team_invites.core.settings import Settings
from team_invites.domain.ports.team_repository import TeamRepositoryPort
from team_invites.domain.ports.invite_client import InviteClientPort
from team_invites.domain.services.team_service import TeamService
from team_invites.domain.services.config_resolver import ConfigResolver
from team_invites.domain.services.invite_service import InviteService

from team_invites.infrastructure.database import make_engine, make_session_factory
from team_invites.infrastructure.adapters.repository.sqlalchemy_team_repository import SqlAlchemyTeamRepository
from team_invites.infrastructure.adapters.invite.chatgpt_invite_adapter import ChatGPTInviteAdapter


class Container:
    def __init__(
        self,
        settings: Settings,
        repository: Optional[TeamRepositoryPort] = None,
        invite_client: Optional[InviteClientPort] = None,
    ):
        self.settings = settings

        if repository is None:
            self.engine = make_engine(settings.database_url)
            repository = SqlAlchemyTeamRepository(make_session_factory(self.engine))
        self.repository = repository

        self.invite_client = invite_client or ChatGPTInviteAdapter(
            base_url=settings.invite_api_base_url,
            timeout=settings.invite_timeout_s,
        )

        self.team_service = TeamService(self.repository)
        self.resolver = ConfigResolver(
            self.team_service,
            fallback_token=settings.chatgpt_token,
            fallback_account_id=settings.chatgpt_account_id,
        )
        self.invite_service = InviteService(self.invite_client)
