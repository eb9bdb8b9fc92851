from dataclasses import dataclass
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    app_name: str = "AssetVerse"
    api_version: str = "v1"
    secret_key: str = os.getenv("ASSETVERSE_SECRET_KEY", "change-me-for-production")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))
    default_package_limit: int = int(os.getenv("DEFAULT_PACKAGE_LIMIT", "5"))
    site_domain: str = os.getenv("SITE_DOMAIN", "http://localhost:5173")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    data_dir: Path = Path(os.getenv("ASSETVERSE_DATA_DIR", Path(__file__).resolve().parents[2] / "data"))

    @property
    def event_log_path(self) -> Path:
        return self.data_dir / "events.jsonl"


settings = Settings()
settings.data_dir.mkdir(parents=True, exist_ok=True)
