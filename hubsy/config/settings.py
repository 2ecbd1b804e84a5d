# hubsy/config/settings.py
import os
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

BASE_DIR = Path(__file__).resolve().parents[2]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "hubsy"
    host: str = "0.0.0.0"
    port: int = 3000
    images_dir: Path = BASE_DIR / "images"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Lee la configuración del entorno (y del .env si existe)."""
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            mongo_uri=os.getenv("MONGO_URI", cls.mongo_uri),
            mongo_database=os.getenv("MONGO_DATABASE", cls.mongo_database),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", cls.port)),
            images_dir=Path(os.getenv("IMAGES_DIR", str(BASE_DIR / "images"))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # uvicorn ya registra cada acceso; nuestro middleware hace lo mismo
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
