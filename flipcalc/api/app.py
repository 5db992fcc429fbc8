"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flipcalc.config import settings
from flipcalc.api.routes import analysis, renovation, timeline

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Flip Analyzer",
    description="Fix-and-Flip Deal Analysis Tool",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analysis.router)
app.include_router(renovation.router)
app.include_router(timeline.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
