# schema_analyzer/session.py
"""
Analysis sessions: one aggregated schema per distinct query text.

The merge engine takes no locks, so a session serializes every merge on
its own schema. Sessions live in a process-local registry.
"""
import logging
import threading
import uuid
from typing import Any, Dict, List, Optional

from .known_fields import FieldEntry, get_known_fields
from .schema import Schema
from .schema_infer import update_schema_with_document
from .schema_query import get_property_names_at_level
from .serialization import dump_schema
from .storage import DocumentSource

logger = logging.getLogger(__name__)


class SessionNotFound(KeyError):
    def __init__(self, session_id):
        self.session_id = session_id
        super().__init__(f"No session found for id {session_id}")


class AnalysisSession:
    def __init__(self, source: Optional[DocumentSource] = None):
        self._source = source
        self._lock = threading.Lock()
        self._current_query_text = ""
        self._current_schema = Schema()
        self._current_raw_documents: List[Any] = []

    @property
    def query_text(self):
        return self._current_query_text

    def reset_if_query_changed(self, query):
        """Start a fresh schema when the (trimmed, case-insensitive) query text changes."""
        query = (query or "").strip()
        if query.casefold() == self._current_query_text.casefold():
            return False

        logger.info("query changed, discarding schema after %d documents",
                    self._current_schema.documents_inspected)
        self._current_schema = Schema()
        self._current_raw_documents = []
        self._current_query_text = query
        return True

    def merge_documents(self, documents, query=""):
        with self._lock:
            self.reset_if_query_changed(query)
            self._current_raw_documents = list(documents)
            for doc in self._current_raw_documents:
                update_schema_with_document(self._current_schema, doc)
            return len(self._current_raw_documents)

    def run_query_with_cache(self, database_name, collection_name, query, page_number, page_size):
        if self._source is None:
            self._source = DocumentSource()

        documents = self._source.run_query(
            database_name,
            collection_name,
            query,
            (page_number - 1) * page_size,  # page number to documents skipped
            page_size,
        )
        return self.merge_documents(documents, query)

    def get_current_page_as_table(self, path: List[str]) -> Dict[str, Any]:
        with self._lock:
            return {
                "path": list(path),
                "headers": get_property_names_at_level(self._current_schema, path),
            }

    def get_current_raw_documents(self):
        with self._lock:
            return list(self._current_raw_documents)

    def get_current_schema(self) -> Schema:
        """The live schema; callers sharing the session should use the locked readers below."""
        return self._current_schema

    @property
    def documents_inspected(self):
        with self._lock:
            return self._current_schema.documents_inspected

    def dump_current_schema(self) -> bytes:
        with self._lock:
            return dump_schema(self._current_schema)

    def get_known_fields(self) -> List[FieldEntry]:
        with self._lock:
            return get_known_fields(self._current_schema)


_sessions: Dict[str, AnalysisSession] = {}
_sessions_lock = threading.Lock()


def init_new_session(source: Optional[DocumentSource] = None) -> str:
    session_id = uuid.uuid4().hex
    with _sessions_lock:
        _sessions[session_id] = AnalysisSession(source)
    logger.info("session %s created", session_id)
    return session_id


def get_session(session_id: str) -> AnalysisSession:
    with _sessions_lock:
        session = _sessions.get(session_id)
    if session is None:
        raise SessionNotFound(session_id)
    return session


def close_session(session_id: str) -> None:
    with _sessions_lock:
        session = _sessions.pop(session_id, None)
    if session is None:
        raise SessionNotFound(session_id)
    logger.info("session %s closed", session_id)


def open_session_count() -> int:
    with _sessions_lock:
        return len(_sessions)
