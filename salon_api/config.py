# salon_api/config.py

import os
import warnings
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_JWT_SECRET = "default_secret"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    database_url: str = "sqlite:///./salon.db"

    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    login_token_expire_minutes: int = 60

    # S3-compatible object storage for product images
    storage_endpoint_url: Optional[str] = None
    storage_access_key_id: Optional[str] = None
    storage_secret_access_key: Optional[str] = None
    storage_region: str = "us-east-1"
    storage_bucket: str = "salon-media"
    storage_public_url: Optional[str] = None

    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    port: int = 4000

    @property
    def public_base_url(self) -> str:
        if self.storage_public_url:
            return self.storage_public_url.rstrip("/")
        return f"https://{self.storage_bucket}.s3.amazonaws.com"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            warnings.warn(
                "JWT_SECRET not set! Using insecure default - DO NOT USE IN PRODUCTION",
                RuntimeWarning,
                stacklevel=2,
            )
            jwt_secret = DEFAULT_JWT_SECRET

        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./salon.db"),
            jwt_secret=jwt_secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            login_token_expire_minutes=int(os.getenv("LOGIN_TOKEN_EXPIRE_MINUTES", "60")),
            storage_endpoint_url=os.getenv("STORAGE_ENDPOINT_URL"),
            storage_access_key_id=os.getenv("STORAGE_ACCESS_KEY_ID"),
            storage_secret_access_key=os.getenv("STORAGE_SECRET_ACCESS_KEY"),
            storage_region=os.getenv("STORAGE_REGION", "us-east-1"),
            storage_bucket=os.getenv("STORAGE_BUCKET", "salon-media"),
            storage_public_url=os.getenv("STORAGE_PUBLIC_URL"),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=int(os.getenv("PORT", "4000")),
        )
