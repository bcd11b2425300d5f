# schema_analyzer/api.py
from fastapi import APIRouter, Body, HTTPException, Response

from . import config
from .schema_query import SchemaPathNotFound
from .serialization import DocumentParseError, documents_from_json
from .session import SessionNotFound, close_session, get_session, init_new_session

router = APIRouter()


def _session_or_404(session_id):
    try:
        return get_session(session_id)
    except SessionNotFound:
        raise HTTPException(404, detail=f"No session found for id {session_id}")


@router.post("/sessions")
def create_session():
    return {"session_id": init_new_session()}


@router.delete("/sessions/{session_id}")
def delete_session(session_id: str):
    try:
        close_session(session_id)
    except SessionNotFound:
        raise HTTPException(404, detail=f"No session found for id {session_id}")
    return {"session_id": session_id, "status": "closed"}


@router.post("/sessions/{session_id}/documents")
def merge_documents(session_id: str, batch: dict = Body(...)):
    """
    Accepts {"query": "...", "documents": [ {...}, {...} ] } with values in
    MongoDB Extended JSON and folds them into the session schema.
    """
    session = _session_or_404(session_id)
    if "documents" not in batch or not isinstance(batch["documents"], list):
        raise HTTPException(400, detail="Missing 'documents' array in request body")

    try:
        documents = documents_from_json(batch["documents"])
    except DocumentParseError as e:
        raise HTTPException(400, detail=f"Invalid documents: {e}")

    merged = session.merge_documents(documents, batch.get("query", ""))
    return {
        "merged": merged,
        "documentsInspected": session.documents_inspected,
    }


@router.post("/sessions/{session_id}/query")
def run_query(session_id: str, request: dict = Body(...)):
    session = _session_or_404(session_id)
    database = request.get("database")
    collection = request.get("collection")
    if not database or not collection:
        raise HTTPException(400, detail="Missing 'database' or 'collection'")

    try:
        page_number = int(request.get("pageNumber", 1))
        page_size = int(request.get("pageSize", config.DEFAULT_PAGE_SIZE))
    except (TypeError, ValueError):
        raise HTTPException(400, detail="'pageNumber' and 'pageSize' must be integers")
    if page_number < 1 or page_size < 1:
        raise HTTPException(400, detail="'pageNumber' and 'pageSize' must be positive")

    try:
        count = session.run_query_with_cache(
            database, collection, request.get("query", ""), page_number, page_size
        )
    except DocumentParseError as e:
        raise HTTPException(400, detail=f"Invalid query: {e}")
    return {"documents": count}


@router.get("/sessions/{session_id}/schema")
def get_schema(session_id: str):
    session = _session_or_404(session_id)
    return Response(content=session.dump_current_schema(), media_type="application/json")


@router.get("/sessions/{session_id}/headers")
def get_headers(session_id: str, path: str = ""):
    session = _session_or_404(session_id)
    segments = [segment for segment in path.split(".") if segment]
    try:
        return session.get_current_page_as_table(segments)
    except SchemaPathNotFound as e:
        raise HTTPException(404, detail={"message": str(e), "path": e.path})


@router.get("/sessions/{session_id}/known-fields")
def known_fields(session_id: str):
    session = _session_or_404(session_id)
    return [
        {"path": field.path, "type": field.type}
        for field in session.get_known_fields()
    ]
