import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from team_invites.api.deps import get_resolver, get_invite_service
from team_invites.domain.services.config_resolver import ConfigResolver
from team_invites.domain.services.invite_service import InviteService, validate_emails
from team_invites.domain.models.invite import InviteRequest, DEFAULT_ROLE
from team_invites.domain.exceptions import (
    ValidationError,
    NoConfigAvailable,
    InvalidSelection,
    InviteTransportError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["invite"])


class InviteIn(BaseModel):
    emails: Optional[List[str]] = None
    role: Optional[str] = None
    resend: Optional[bool] = None
    team_id: Any = Field(None, alias="teamId")


@router.post("/invite")
async def send_invites(
    payload: InviteIn,
    resolver: ConfigResolver = Depends(get_resolver),
    service: InviteService = Depends(get_invite_service),
):
    try:
        emails = validate_emails(payload.emails)
        team = await resolver.resolve(payload.team_id)
    except (ValidationError, InvalidSelection) as e:
        return JSONResponse(status_code=400, content={"error": e.message})
    except NoConfigAvailable as e:
        return JSONResponse(status_code=500, content={"error": e.message})

    request = InviteRequest(
        emails=emails,
        role=payload.role or DEFAULT_ROLE,
        resend=bool(payload.resend),
    )

    try:
        result = await service.dispatch(request, team)
    except InviteTransportError as e:
        logger.exception("Invite Error: %s", e.message)
        return JSONResponse(
            status_code=500,
            content={"success": False, "team": team.name, "error": e.message},
        )
    except Exception as e:
        logger.exception("Invite Error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "team": team.name, "error": str(e) or type(e).__name__},
        )

    return JSONResponse(
        status_code=result.http_status,
        content={"success": result.success, "team": team.name, "details": result.to_dict()},
    )
