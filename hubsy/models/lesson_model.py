# hubsy/models/lesson_model.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class LessonIn(BaseModel):
    """Lección tal como se carga desde el seed (campos extra se conservan)."""
    title: str
    location: str
    spaces: int = Field(ge=0)
    price: Optional[float] = None
    image: Optional[str] = None

    model_config = ConfigDict(extra="allow")
