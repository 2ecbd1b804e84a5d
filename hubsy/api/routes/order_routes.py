# order_routes.py
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from hubsy.api.dependencies import get_connection
from hubsy.config.database import MongoConnection
from hubsy.models.results_model import ErrorOut, InsertAck, error_content
from hubsy.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", status_code=201, response_model=InsertAck, responses={500: {"model": ErrorOut}})
def create_order(body: Optional[dict] = Body(None), conn: MongoConnection = Depends(get_connection)):
    """Guarda el pedido tal cual llega y devuelve el ack de Mongo."""
    try:
        return OrderService(conn.get_db()).create(body or {})
    except Exception as e:
        return JSONResponse(status_code=500, content=error_content(e))
