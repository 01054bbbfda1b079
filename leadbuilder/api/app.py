"""
Lead Builder - FastAPI Backend
Stateless REST API over the lead insight engine.

Run: uvicorn leadbuilder.api.app:app --reload --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leadbuilder import config
from leadbuilder.api.routers import leads
from leadbuilder.logging_config import setup_logging

VERSION = "1.0.0"

setup_logging()
logger = logging.getLogger("leadbuilder.api")

app = FastAPI(
    title="Lead Intelligence Builder",
    description="Lead scoring, email guessing, and personalized outreach drafts.",
    version=VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(leads.router)


# ─── HEALTH CHECK ───────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {"status": "healthy", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    errors = config.validate()
    for e in errors:
        logger.warning("Config error: %s", e)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
