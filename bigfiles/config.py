from __future__ import annotations
import os
from functools import lru_cache

import psutil
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default

def hardware_workers() -> int:
    return psutil.cpu_count(logical=True) or 1

class Settings(BaseModel):
    workers: int = Field(default_factory=lambda: _env_int("BIGFILES_WORKERS", 0))  # 0 = auto
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    log_format: str = Field(default_factory=lambda: os.getenv("LOG_FORMAT", "plain").lower())

    def resolved_workers(self) -> int:
        return self.workers if self.workers > 0 else hardware_workers()

@lru_cache
def get_settings() -> Settings:
    return Settings()
