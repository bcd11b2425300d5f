# schema_analyzer/storage.py
import logging

from pymongo import MongoClient

from . import config
from .serialization import DocumentParseError, loads_extended_json

logger = logging.getLogger(__name__)


class DocumentSource:
    """Fetches pages of documents for a session; the client is created on first use."""

    def __init__(self, client=None, mongo_url=None):
        self._client = client
        self._mongo_url = mongo_url or config.MONGO_URL

    @property
    def client(self):
        if self._client is None:
            self._client = MongoClient(self._mongo_url)
        return self._client

    def run_query(self, database_name, collection_name, query, skip, limit):
        query_filter = loads_extended_json(query) if query and query.strip() else {}
        if not isinstance(query_filter, dict):
            raise DocumentParseError("query filter must be a JSON object")

        collection = self.client[database_name][collection_name]
        logger.debug("find on %s.%s skip=%d limit=%d", database_name, collection_name, skip, limit)
        return list(collection.find(query_filter).skip(skip).limit(limit))
