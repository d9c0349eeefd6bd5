# roster/api/main.py
"""ASGI application serving the people endpoint.

``ROSTER_CORS_ORIGINS`` (comma separated) and ``ROSTER_CORS_ALLOW_CREDENTIALS``
shape CORS. ``ROSTER_API_LEGACY_ROOT_ROUTES=0`` keeps the router off ``/people``
so it is only reachable under ``/api/people``.
"""
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.routes.people import router as people_router

LOCAL_DEV_ORIGINS = [
    f"http://{host}:{port}" for port in (3000, 5173) for host in ("127.0.0.1", "localhost")
]


def env_list(name: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, "").split(",") if item.strip()]


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


def create_app() -> FastAPI:
    app = FastAPI(title="roster")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=env_list("ROSTER_CORS_ORIGINS") or LOCAL_DEV_ORIGINS,
        allow_credentials=env_flag("ROSTER_CORS_ALLOW_CREDENTIALS"),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/status")
    def status():
        return {"ok": True}

    prefixes = ["/api/people"]
    if env_flag("ROSTER_API_LEGACY_ROOT_ROUTES", default=True):
        prefixes.insert(0, "/people")
    for prefix in prefixes:
        app.include_router(people_router, prefix=prefix, tags=["Person"])
    return app


app = create_app()
