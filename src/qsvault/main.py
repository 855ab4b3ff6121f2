from fastapi import FastAPI

from qsvault import __version__
from qsvault.api.routes.issues import router as issues_router
from qsvault.config import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="qsvault",
        version=__version__,
        debug=settings.debug,
    )

    app.include_router(issues_router)

    @app.get("/api/system/status")
    async def system_status() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
