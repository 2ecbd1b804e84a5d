from datetime import datetime, timezone
import logging

from fastapi import Request

logger = logging.getLogger("hubsy.requests")


def _iso_now() -> str:
	# ISO-8601 en UTC con milisegundos: 2024-01-01T12:00:00.000Z
	return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


async def request_logger_middleware(request: Request, call_next):
	"""
	Middleware HTTP que registra cada request antes de procesarla.
	- Una línea por request: timestamp ISO-8601, método y path (con query)
	- No corta la cadena: siempre delega en call_next
	"""

	path = request.url.path
	if request.url.query:
		path = f"{path}?{request.url.query}"

	logger.info(f"[{_iso_now()}] {request.method} request to {path}")

	return await call_next(request)
