# schema_analyzer/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .api import router as sessions_router
from .session import open_session_count

config.configure_logging()

app = FastAPI(
    title="BSON Schema Analyzer API",
    description="Aggregates schemas over MongoDB documents, one analysis session per client.",
    version="0.1",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(sessions_router, prefix="", tags=["sessions"])


@app.get("/health")
def health():
    return {"status": "ok", "sessions": open_session_count()}
