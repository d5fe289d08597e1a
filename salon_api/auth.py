# salon_api/auth.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext

from .config import Settings
from .deps import get_settings
from .errors import InvalidToken, Unauthenticated

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
# auto_error off so a missing header reaches get_current_user_id as None
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)


def create_access_token(
    user_id: str,
    settings: Settings,
    expires_minutes: Optional[int] = None,
) -> str:
    """Sign a token carrying the user id.

    Signup tokens are issued without ``expires_minutes`` and never expire;
    login tokens expire after ``settings.login_token_expire_minutes``.
    """
    to_encode = {"user": {"id": user_id}}
    if expires_minutes is not None:
        to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> str:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise InvalidToken()

    user = payload.get("user")
    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise InvalidToken()
    return user_id


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def get_current_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    if not token:
        raise Unauthenticated()
    return decode_access_token(token, settings)
