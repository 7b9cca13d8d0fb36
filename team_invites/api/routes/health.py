from fastapi import APIRouter, Depends

from team_invites.api.deps import get_resolver
from team_invites.domain.services.config_resolver import ConfigResolver

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(resolver: ConfigResolver = Depends(get_resolver)):
    configs = await resolver.all_configs()
    return {"status": "ok", "teamsCount": len(configs)}
