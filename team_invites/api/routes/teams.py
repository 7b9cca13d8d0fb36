from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from team_invites.api.deps import get_team_service
from team_invites.domain.services.team_service import TeamService
from team_invites.domain.models.team import Team, DEFAULT_TEAM_NAME
from team_invites.domain.exceptions import ValidationError

router = APIRouter(prefix="/api/teams", tags=["teams"])


class TeamCreateIn(BaseModel):
    token: Optional[str] = None
    account_id: Optional[str] = Field(None, alias="accountId")
    name: Optional[str] = None


@router.get("")
async def list_teams(service: TeamService = Depends(get_team_service)):
    teams = await service.list_teams()
    return [t.to_dict() for t in teams]


@router.post("", status_code=201)
async def create_team(
    payload: TeamCreateIn,
    service: TeamService = Depends(get_team_service),
):
    # no client-supplied id: this endpoint only ever creates
    team = Team(
        token=payload.token or "",
        account_id=payload.account_id or "",
        name=payload.name or DEFAULT_TEAM_NAME,
    )
    try:
        team = await service.save_team(team)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    return {"success": True, "team": team.to_dict()}


@router.delete("/{team_id}")
async def delete_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    if not team_id.strip():
        return JSONResponse(status_code=400, content={"error": "Team id is required"})
    await service.delete_team(team_id)
    return {"success": True}
