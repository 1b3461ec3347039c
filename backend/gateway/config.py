"""
Runtime configuration for the gateway.

All values come from the process environment. A `.env` file in the working
directory (or any parent) is loaded once, here, before anything is read.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load .env only once here
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public"


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = ""
    db_name: str = "cadastros"
    db_pool_min: int = 1
    db_pool_max: int = 10
    public_dir: Path = DEFAULT_PUBLIC_DIR
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables, falling back to defaults.

        Raises:
            ValueError: If a numeric variable is not an integer.
        """
        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", 3000)),
            database_url=os.getenv("DATABASE_URL") or None,
            db_host=os.getenv("DB_HOST", "localhost"),
            db_port=int(os.getenv("DB_PORT", 5432)),
            db_user=os.getenv("DB_USER", "postgres"),
            db_password=os.getenv("DB_PASSWORD", ""),
            db_name=os.getenv("DB_NAME", "cadastros"),
            db_pool_min=int(os.getenv("DB_POOL_MIN", 1)),
            db_pool_max=int(os.getenv("DB_POOL_MAX", 10)),
            public_dir=Path(os.getenv("PUBLIC_DIR", str(DEFAULT_PUBLIC_DIR))),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def database_dsn(self) -> str:
        """DATABASE_URL if set, otherwise a DSN built from the DB_* variables."""
        if self.database_url:
            return self.database_url
        return (
            f"host={self.db_host} port={self.db_port} dbname={self.db_name} "
            f"user={self.db_user} password={self.db_password}"
        )
