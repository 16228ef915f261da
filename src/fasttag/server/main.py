"""
FastTag API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from fasttag import __version__
from fasttag.log import configure_logging
from fasttag.server.routes import lexicons, tag


log = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        log.info("  %-8s %-40s → %s", methods, path, name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    log_routes(app)
    yield


app = FastAPI(title="FastTag API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tag.router)
app.include_router(lexicons.router)


@app.get("/")
async def root():
    return {"name": "FastTag API", "version": __version__}
