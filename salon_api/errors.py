# salon_api/errors.py

from typing import Optional

from fastapi import HTTPException


class Conflict(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=400, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Access denied. No token provided."):
        super().__init__(
            status_code=401,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidToken(HTTPException):
    def __init__(self, detail: str = "Invalid token."):
        super().__init__(status_code=400, detail=detail)


class InvalidCredentials(HTTPException):
    # Same message for unknown user and wrong password
    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(status_code=400, detail=detail)


class UploadFailed(HTTPException):
    def __init__(self, detail: str, message: Optional[str] = "Image upload failed"):
        super().__init__(status_code=500, detail=detail)
        self.message = message
