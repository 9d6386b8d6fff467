import os
import yaml

ROOT_PATH = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_FILE_PATH = os.environ.get("STOREFRONT_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./storefront.db")
    CREATE_TABLES = bool(data.get("CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 4000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5173")

    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_DAYS = data.get("JWT_EXPIRES_DAYS", 7)
    COOKIE_EXPIRES_DAYS = data.get("COOKIE_EXPIRES_DAYS", 7)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 10)
    RESET_TOKEN_EXPIRE_MINUTES = data.get("RESET_TOKEN_EXPIRE_MINUTES", 30)

    SMTP_HOST = data.get("SMTP_HOST", "localhost")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "Storefront")
    SMTP_FROM_EMAIL = data.get("SMTP_FROM_EMAIL", "noreply@storefront.local")

    CLOUDINARY_CLOUD_NAME = data.get("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = data.get("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = data.get("CLOUDINARY_API_SECRET", "")
    CLOUDINARY_TIMEOUT_SEC = data.get("CLOUDINARY_TIMEOUT_SEC", 30.0)
