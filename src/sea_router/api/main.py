"""FastAPI application entrypoint."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sea_router.api.endpoints import router as route_router


app = FastAPI(
    title="Sea Router",
    description="Shortest maritime routes between two coordinates over a navigation graph",
    version="0.1.0",
)

# Browser map clients call the route endpoints cross-origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(route_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "version": app.version}
