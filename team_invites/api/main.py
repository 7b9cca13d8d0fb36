import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from team_invites.api.deps import get_container, get_settings
from team_invites.api.routes import (
    teams_router,
    invite_router,
    config_router,
    health_router,
    manage_router,
)

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # storage handle and http client are built once, before serving
    container = app.dependency_overrides.get(get_container, get_container)()
    logger.info("Team store ready (%s)", type(container.repository).__name__)
    yield
    await container.invite_client.aclose()
    # the cached container now holds a closed client
    get_container.cache_clear()


def create_app() -> FastAPI:
    app = FastAPI(title="Team Invites", lifespan=lifespan)

    app.include_router(health_router)
    app.include_router(teams_router)
    app.include_router(invite_router)
    app.include_router(config_router)
    app.include_router(manage_router)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        msg = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(status_code=400, content={"error": msg})

    return app


app = create_app()


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
