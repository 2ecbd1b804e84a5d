# hubsy/config/database.py
import logging
import threading
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from hubsy.config.settings import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Conexión compartida a MongoDB.
    - Se crea una sola vez al arrancar el proceso y se inyecta en cada handler.
    - connect_in_background() no bloquea el arranque del servidor.
    - Mientras no esté lista, get_db() lanza RuntimeError.
    """

    def __init__(self, uri: str, db_name: str):
        self.uri = uri
        self.db_name = db_name
        self.client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._ready = threading.Event()

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(settings.mongo_uri, settings.mongo_database)

    @classmethod
    def from_client(cls, client, db_name: str) -> "MongoConnection":
        """Envuelve un cliente ya creado (ej. mongomock en tests) y la marca lista."""
        conn = cls(uri="", db_name=db_name)
        conn.client = client
        conn._db = client[db_name]
        conn._ready.set()
        return conn

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set()

    def connect(self, server_selection_timeout_ms: Optional[int] = None) -> Database:
        # Sin timeout propio por defecto: el cliente vive todo el proceso con los defaults del driver
        kwargs = {}
        if server_selection_timeout_ms is not None:
            kwargs["serverSelectionTimeoutMS"] = server_selection_timeout_ms
        client = MongoClient(self.uri, **kwargs)
        try:
            client.admin.command("ping")
        except Exception:
            client.close()
            raise
        self.client = client
        self._db = client[self.db_name]
        self._ready.set()
        logger.info(f"🟢 Mongo conectado a la base: {self._db.name}")
        return self._db

    def _connect_safely(self) -> None:
        try:
            self.connect()
        except Exception as e:
            logger.error(f"❌ Error al conectar a MongoDB: {e}")

    def connect_in_background(self) -> threading.Thread:
        t = threading.Thread(target=self._connect_safely, name="mongo-connect", daemon=True)
        t.start()
        return t

    def get_db(self) -> Database:
        if not self._ready.is_set() or self._db is None:
            raise RuntimeError("MongoDB connection is not ready")
        return self._db

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
        self._ready.clear()
        self._db = None


def probar_mongo(settings: Optional[Settings] = None) -> bool:
    """Prueba la conexión a MongoDB usando la URI y la DB del entorno."""
    settings = settings or Settings.from_env()
    conn = MongoConnection.from_settings(settings)
    try:
        db = conn.connect(server_selection_timeout_ms=5000)
        print(f"🟢 Mongo conectado a la base: {db.name} ({db['lessons'].count_documents({})} lessons)")
        return True
    except Exception as e:
        print(f"❌ Error al conectar a MongoDB: {e}")
        return False
    finally:
        conn.close()


if __name__ == "__main__":
    # Esto permite ejecutar el archivo directamente para probar
    raise SystemExit(0 if probar_mongo() else 1)
