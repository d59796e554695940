"""
Configuración de la aplicación.

Todo sale de variables de entorno; si hay un .env en la raíz del proyecto se
carga primero.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from app.services.validation import MedalPolicy

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


def get_bool_env(key: str, default: bool = False) -> bool:
    value = os.getenv(key, str(default)).lower()
    return value in ("true", "1", "yes", "on")


def get_list_env(key: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


def parse_medal_policy(value) -> MedalPolicy:
    if isinstance(value, MedalPolicy):
        return value
    return MedalPolicy(str(value).strip().lower())

class Settings:

    def __init__(self, **overrides):
        self.secret_key = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
        self.algorithm = "HS256"
        self.access_token_expire_minutes = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "720"))

        self.medal_policy = os.getenv("MEDAL_POLICY", MedalPolicy.STRICT.value)

        self.admin_username = os.getenv("ADMIN_USERNAME", "admin")
        self.admin_password = os.getenv("ADMIN_PASSWORD", "admin")
        self.seed_on_startup = get_bool_env("SEED_ON_STARTUP", True)

        self.cors_origins = get_list_env(
            "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
        )
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)

        self.medal_policy = parse_medal_policy(self.medal_policy)
