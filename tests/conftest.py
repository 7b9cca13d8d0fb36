from __future__ import annotations

from typing import Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from team_invites.api.deps import get_container
from team_invites.api.main import create_app
from team_invites.core.container import Container
from team_invites.core.settings import Settings
from team_invites.domain.models.team import Team
from team_invites.domain.ports.team_repository import TeamRepositoryPort
from team_invites.domain.services.team_service import TeamService
from team_invites.infrastructure.adapters.invite.chatgpt_invite_adapter import ChatGPTInviteAdapter


class InMemoryTeamRepository(TeamRepositoryPort):
    def __init__(self):
        self.entries: Dict[str, Team] = {}

    def list_teams(self) -> List[Team]:
        return list(self.entries.values())

    def put_team(self, team: Team) -> None:
        self.entries[team.id] = team

    def delete_team(self, team_id: str) -> None:
        self.entries.pop(team_id, None)


class UpstreamRecorder:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code: int = 200, json_body=None, text: str | None = None, exc: Exception | None = None):
        self.status_code = status_code
        self.json_body = {"account_invites": []} if json_body is None else json_body
        self.text = text
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def repo() -> InMemoryTeamRepository:
    return InMemoryTeamRepository()


@pytest.fixture
def team_service(repo) -> TeamService:
    return TeamService(repo)


@pytest.fixture
def upstream() -> UpstreamRecorder:
    return UpstreamRecorder()


def make_settings(**overrides) -> Settings:
    values = {
        "chatgpt_token": "",
        "chatgpt_account_id": "",
        "database_url": "sqlite://",
        "invite_api_base_url": "https://upstream.test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def container(settings, repo, upstream) -> Container:
    adapter = ChatGPTInviteAdapter(
        base_url=settings.invite_api_base_url,
        transport=httpx.MockTransport(upstream),
    )
    return Container(settings, repository=repo, invite_client=adapter)


@pytest.fixture
def client(container):
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    with TestClient(app) as c:
        yield c
