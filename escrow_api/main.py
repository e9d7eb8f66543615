from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from escrow_api.routes import calendar
from escrow_api.settings import get_settings
from escrow_core.errors import CalendarError


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    app = FastAPI(title=f"{settings.app_title} API", version="0.1.0")

    app.include_router(calendar.router)

    @app.exception_handler(CalendarError)
    async def _calendar_error_handler(request: Request, exc: CalendarError):
        logging.getLogger("escrow_api").info("Rejected calendar request: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc), "error": type(exc).__name__})

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logging.getLogger("escrow_api").exception("Unhandled exception: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Internal error"})

    @app.get("/health")
    async def health():
        return {"ok": True}

    return app


app = create_app()
