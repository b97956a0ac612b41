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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./credentials.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Outbound mail
    SMTP_ENABLED = bool(data.get("SMTP_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USERNAME = data.get("SMTP_USERNAME")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD")
    SMTP_FROM_ADDRESS = data.get("SMTP_FROM_ADDRESS", "")
    SMTP_FROM_NAME = data.get("SMTP_FROM_NAME", "")
    SMTP_USE_SSL = bool(data.get("SMTP_USE_SSL", True))
    SMTP_STARTTLS = bool(data.get("SMTP_STARTTLS", True))

    # Credential lifecycle
    RECOVERY_CODE_VALIDITY_MINUTES = data.get("RECOVERY_CODE_VALIDITY_MINUTES", 60)
    GENERATED_PASSWORD_LENGTH = data.get("GENERATED_PASSWORD_LENGTH", 8)
    NOTIFICATION_FAILURE_IS_FATAL = bool(data.get("NOTIFICATION_FAILURE_IS_FATAL", True))
