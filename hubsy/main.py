# hubsy/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hubsy.api.middleware.request_logger import request_logger_middleware
from hubsy.api.static_files import PublicStaticFiles
from hubsy.api.routes.lesson_routes import router as lesson_router
from hubsy.api.routes.order_routes import router as order_router
from hubsy.config.database import MongoConnection
from hubsy.config.settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    conn: MongoConnection = app.state.mongo
    # El server acepta requests ya; Mongo conecta en segundo plano
    if not conn.is_ready:
        conn.connect_in_background()
    yield
    conn.close()


def create_app(settings: Optional[Settings] = None,
               connection: Optional[MongoConnection] = None,
               images_dir: Optional[Path] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="Hubsy Lessons API", version="1.0.0",
                  description="Catálogo de lecciones y pedidos para el frontend de Hubsy.",
                  lifespan=lifespan)
    app.state.mongo = connection or MongoConnection.from_settings(settings)

    # CORS abierto: el frontend se sirve desde otro origen
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Registrado después de CORS para que sea el primero en ejecutarse
    app.middleware("http")(request_logger_middleware)

    images_dir = Path(images_dir or settings.images_dir)
    if images_dir.is_dir():
        app.mount("/images", PublicStaticFiles(directory=images_dir), name="images")
    else:
        logger.warning(f"⚠️ Carpeta de imágenes no encontrada: {images_dir}; /images responderá 404")

    @app.get("/", tags=["Health"])
    async def root():
        return {"message": "✅ Hubsy API is up and running."}

    app.include_router(lesson_router, prefix="/api")
    app.include_router(order_router, prefix="/api")

    return app
