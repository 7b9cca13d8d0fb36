from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from team_invites.core.settings import Settings
from team_invites.core.container import Container
from team_invites.domain.services.team_service import TeamService
from team_invites.domain.services.config_resolver import ConfigResolver
from team_invites.domain.services.invite_service import InviteService


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_container() -> Container:
    return Container(get_settings())


def get_team_service(container: Container = Depends(get_container)) -> TeamService:
    return container.team_service


def get_resolver(container: Container = Depends(get_container)) -> ConfigResolver:
    return container.resolver


def get_invite_service(container: Container = Depends(get_container)) -> InviteService:
    return container.invite_service
