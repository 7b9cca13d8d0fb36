from fastapi import APIRouter, Depends

from team_invites.api.deps import get_resolver
from team_invites.domain.services.config_resolver import ConfigResolver

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/config")
async def current_config(resolver: ConfigResolver = Depends(get_resolver)):
    """First resolved configuration, kept for older clients."""
    config = await resolver.current_config()
    if config is None:
        return {"token": None, "accountId": None, "hasConfig": False}
    return {
        "token": config.token,
        "accountId": config.account_id,
        "hasConfig": bool(config.token),
    }
