# schema_analyzer/config.py
import logging
import os

MONGO_URL = os.getenv("MONGO_URL", "mongodb://localhost:27017")

# field pinned first when listing property names at a level
ID_FIELD = os.getenv("SCHEMA_ID_FIELD", "_id")

DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "50"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# browser origins allowed to call the HTTP API, comma separated
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]


def configure_logging(level=None):
    """Configure root logging once, using LOG_LEVEL unless a level is given."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
