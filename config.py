import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("DAO_AUTH_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./dao_auth.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # "sql" (SQLModel/async SQLAlchemy) or "memory" (fallback, lost on restart)
    STORAGE_BACKEND = data.get("STORAGE_BACKEND", "sql")
    # "jwt" (stateless) or "session" (server-held session directory)
    TOKEN_MODE = data.get("TOKEN_MODE", "jwt")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 7 * 24 * 60))
    TEMPORARY_PASSWORD_TTL_HOURS = int(data.get("TEMPORARY_PASSWORD_TTL_HOURS", 24))
    RESET_CODE_TTL_MINUTES = int(data.get("RESET_CODE_TTL_MINUTES", 15))
    # Failed verify/reset attempts before an outstanding code is discarded
    RESET_CODE_MAX_ATTEMPTS = int(data.get("RESET_CODE_MAX_ATTEMPTS", 5))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    MIN_PASSWORD_LENGTH = int(data.get("MIN_PASSWORD_LENGTH", 6))

    SMTP_HOST = data.get("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "DAO Management System")
    SMTP_TIMEOUT_SECONDS = float(data.get("SMTP_TIMEOUT_SECONDS", 10))

    FIRST_ADMIN_NAME = data.get("FIRST_ADMIN_NAME", "System Administrator")
    FIRST_ADMIN_EMAIL = data.get("FIRST_ADMIN_EMAIL", "")
    FIRST_ADMIN_PASSWORD = data.get("FIRST_ADMIN_PASSWORD", "")
