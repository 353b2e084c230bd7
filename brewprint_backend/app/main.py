# main.py: backend entrypoint
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from brewprint_backend.app.config import APP_ENV, validate_manifest
from brewprint_backend.app.routers import brewing, recipes
from brewprint_backend.app.utils.logs import get_logger

log = get_logger("main")

app = FastAPI(title="Brewprint API")

# --- CORS for the Expo / web dev servers --------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:8081", "http://127.0.0.1:8081", "http://localhost:19006"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
app.include_router(recipes.router, prefix="/api")   # /api/recipes/...
app.include_router(brewing.router, prefix="/api")   # /api/brewing/...

# --- Health ------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    manifest = validate_manifest()
    return {"ok": manifest["status"] == "ok", "env": APP_ENV, "library": manifest}

# Log final routes for sanity check
@app.on_event("startup")
async def _log_routes():
    log.info("-- Routes mounted --")
    for r in app.router.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            log.info(f"{methods:10s} {r.path}")
