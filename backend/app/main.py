from fastapi import FastAPI
import os
from fastapi.middleware.cors import CORSMiddleware

from datasplit import __version__

# Routers
from .routers.health import router as health_router
from .routers.split import router as split_router

app = FastAPI(
    title="datasplit Local API",
    version=__version__,
    description="Local API exposing train/test dataset splitting",
)

# CORS for dev + optional env override
extra = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        *extra,
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/api/v1", tags=["health"])
app.include_router(split_router,  prefix="/api/v1", tags=["split"])

@app.get("/healthz")
def healthz():
    return {"ok": True}
