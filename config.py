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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./session_gateway.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    REDIS_URL = data.get("REDIS_URL", "redis://localhost:6379/0")
    REDIS_TIMEOUT_SECONDS = float(data.get("REDIS_TIMEOUT_SECONDS", 5))
    CACHE_BACKEND = data.get("CACHE_BACKEND", "redis")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 3000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 86400))
    ENCRYPTION_KEY = data.get(
        "ENCRYPTION_KEY",
        "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef",
    )
    ENCRYPTION_ALGORITHM = data.get("ENCRYPTION_ALGORITHM", "aes-256-gcm")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    GATE_TIMEOUT_SECONDS = float(data.get("GATE_TIMEOUT_SECONDS", 5))
    API_KEY_HEADER = data.get("API_KEY_HEADER", "X-API-Key")
    API_KEY_QUERY_PARAM = data.get("API_KEY_QUERY_PARAM", "api_key")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
