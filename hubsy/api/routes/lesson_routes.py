# lesson_routes.py
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from hubsy.api.dependencies import get_connection
from hubsy.config.database import MongoConnection
from hubsy.models.results_model import ErrorOut, SpacesUpdated, error_content
from hubsy.services.lesson_service import LessonService

router = APIRouter(tags=["lessons"])

_errors = {500: {"model": ErrorOut}}


# La respuesta se arma dentro del try: si un documento no serializa, igual es 500 {message}
@router.get("/lessons", response_model=List[Dict[str, Any]], responses=_errors)
def list_lessons(conn: MongoConnection = Depends(get_connection)):
    """Lista todas las lecciones (orden nativo de Mongo)."""
    try:
        return JSONResponse(content=LessonService(conn.get_db()).list())
    except Exception as e:
        return JSONResponse(status_code=500, content=error_content(e))


@router.put("/lessons/{lesson_id}", response_model=SpacesUpdated, responses=_errors)
def update_spaces(lesson_id: str, body: Optional[dict] = Body(None),
                  conn: MongoConnection = Depends(get_connection)):
    """Pisa el campo spaces de la lección. 200 aunque no matchee ningún documento."""
    body = body or {}
    try:
        return LessonService(conn.get_db()).update_spaces(lesson_id, body.get("spaces"))
    except Exception as e:
        # id mal formado (InvalidId) también cae acá -> 500
        return JSONResponse(status_code=500, content=error_content(e))


@router.get("/search", response_model=List[Dict[str, Any]], responses=_errors)
def search_lessons(q: Optional[str] = Query(None),
                   conn: MongoConnection = Depends(get_connection)):
    try:
        return JSONResponse(content=LessonService(conn.get_db()).search(q))
    except Exception as e:
        return JSONResponse(status_code=500, content=error_content(e))
