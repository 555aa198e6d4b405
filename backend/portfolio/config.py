"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent
DEFAULT_DATABASE_URL = f"sqlite:///{BASE / 'portfolio.db'}"


class Settings:
    ENV: str
    DATABASE_URL: str
    LOG_LEVEL: str
    ALLOW_DEV_CORS: bool
    ALLOW_LOCAL_DB: bool
    PROFILE_NAME: str
    PROFILE_ROLE: str
    PROFILE_DESCRIPTION: str
    PROFILE_SOCIAL_LINKS: list

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self.ALLOW_LOCAL_DB = os.getenv("ALLOW_LOCAL_DB", "false").lower() == "true"
        self.PROFILE_NAME = os.getenv("PROFILE_NAME", "Jane Doe")
        self.PROFILE_ROLE = os.getenv("PROFILE_ROLE", "Software Engineer")
        self.PROFILE_DESCRIPTION = os.getenv(
            "PROFILE_DESCRIPTION",
            "I build web applications and the backends that power them.",
        )
        raw_links = os.getenv("PROFILE_SOCIAL_LINKS", "https://github.com,https://www.linkedin.com")
        self.PROFILE_SOCIAL_LINKS = [link.strip() for link in raw_links.split(",") if link.strip()]
        self._validate()

    def _validate(self):
        if self.ENV != "dev" and not self.ALLOW_LOCAL_DB and self.DATABASE_URL == DEFAULT_DATABASE_URL:
            raise RuntimeError("DATABASE_URL must be set explicitly in non-dev environments")
        for link in self.PROFILE_SOCIAL_LINKS:
            if not link.startswith(("http://", "https://")):
                raise RuntimeError(f"PROFILE_SOCIAL_LINKS entries must be http(s) URLs: {link!r}")


settings = Settings()
