# hubsy/seed.py
"""
Carga inicial de lecciones.

La API no expone alta de lecciones: se crean por fuera con este comando.

    python -m hubsy.seed lessons.json --drop
"""
import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError
from pymongo.database import Database

from hubsy.config.database import MongoConnection
from hubsy.config.settings import Settings, configure_logging
from hubsy.models.lesson_model import LessonIn
from hubsy.repositories.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)

_lessons_adapter = TypeAdapter(List[LessonIn])


def load_lessons(path: Path) -> List[Dict[str, Any]]:
    """Lee y valida el archivo; lanza ValidationError si alguna lección es inválida."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [lesson.model_dump(exclude_none=True) for lesson in _lessons_adapter.validate_python(raw)]


def seed_lessons(db: Database, lessons: List[Dict[str, Any]], drop: bool = False) -> int:
    repo = MongoRepository(db, "lessons")
    if drop:
        removed = repo.delete_all()
        logger.info(f"🗑️ {removed} lecciones eliminadas")
    if not lessons:
        return 0
    res = repo.insert_many(lessons)
    logger.info(f"🌱 {len(res.inserted_ids)} lecciones insertadas")
    return len(res.inserted_ids)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Carga lecciones en MongoDB desde un JSON")
    parser.add_argument("file", type=Path, help="Archivo JSON con un array de lecciones")
    parser.add_argument("--drop", action="store_true", help="Vaciar la colección antes de insertar")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        lessons = load_lessons(args.file)
    except ValidationError as e:
        logger.error(f"❌ Lecciones inválidas en {args.file}:\n{e}")
        return 1

    conn = MongoConnection.from_settings(settings)
    try:
        seed_lessons(conn.connect(), lessons, drop=args.drop)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
