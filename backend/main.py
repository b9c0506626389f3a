import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import init_db, async_session
from routers import admin, link, profiles, translate, vault
from services.runtime import build_runtime
from services.synthesis import synthesize

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    runtime = build_runtime(settings, async_session, synthesize)
    app.state.runtime = runtime

    # Serve the persisted snapshot right away; refresh from the cloud only if permitted.
    await runtime.connectivity.probe()
    report = await runtime.sync.refresh(
        runtime.connectivity.online, runtime.link_settings.force_offline
    )
    logger.info("Vault ready: %d entries (%s)", len(report.entries), report.state.value)
    yield
    await runtime.resolver.drain()


app = FastAPI(title="Omtoloki", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translate.router)
app.include_router(vault.router)
app.include_router(link.router)
app.include_router(profiles.router)
app.include_router(admin.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
