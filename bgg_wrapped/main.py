# bgg_wrapped/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI

from bgg_wrapped.config import settings
from bgg_wrapped.routes.wrapped import router as wrapped_router
from bgg_wrapped.utils.logging import log_info


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_info(f"✅ Board Game Wrapped started (upstream: {settings.BGG_PROXY_URL})")
    yield


app = FastAPI(title="Board Game Wrapped", lifespan=lifespan)

# Rejestracja routerów
app.include_router(wrapped_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
