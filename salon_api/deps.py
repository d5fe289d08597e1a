# salon_api/deps.py

from typing import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from .config import Settings
from .context import AppContext
from .media import MediaStore


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_settings(context: AppContext = Depends(get_context)) -> Settings:
    return context.settings


# Dependency: one session per request
def get_session(context: AppContext = Depends(get_context)) -> Iterator[Session]:
    with Session(context.engine) as session:
        yield session


def get_media_store(context: AppContext = Depends(get_context)) -> MediaStore:
    return context.media
