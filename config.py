import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    SERVICE_NAME = data.get("SERVICE_NAME", "xenia-api")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./xenia.db")
    API_PORT = data.get("API_PORT", 3000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    COOKIE_NAME = data.get("COOKIE_NAME", "xenia_sid")
    SESSION_TTL_DAYS = int(data.get("SESSION_TTL_DAYS", 7))
    INVITATION_TTL_DAYS = int(data.get("INVITATION_TTL_DAYS", 7))

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == "production"
