# hubsy/api/static_files.py
from pathlib import PurePath

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException


class PublicStaticFiles(StaticFiles):
    """StaticFiles que no expone archivos ni carpetas ocultas (.gitkeep, .env, ...)."""

    async def get_response(self, path: str, scope):
        if any(part.startswith(".") for part in PurePath(path).parts):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)
