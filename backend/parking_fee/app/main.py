"""FastAPI entry point for the Parking Fee Service."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parking_fee.interfaces import deps, pricing_router

app = FastAPI(title="Parking Fee Service")

app.include_router(pricing_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=deps.settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
def health_check() -> dict:
    """Expose a minimal health endpoint to help dev tooling."""
    return {"status": "ok", "configVersion": deps.settings.version}


print(f"[main] Parking Fee Service ready, CORS origins: {deps.settings.cors_origins}")
