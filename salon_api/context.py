# salon_api/context.py

from dataclasses import dataclass

from sqlalchemy.engine import Engine

from .config import Settings
from .db import make_engine
from .media import MediaStore


@dataclass
class AppContext:
    """Everything built once per process and shared by all requests."""

    settings: Settings
    engine: Engine
    media: MediaStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            engine=make_engine(settings.database_url),
            media=MediaStore.from_settings(settings),
        )
