import os


class Settings:
    def __init__(self):
        self.app_name = "Pathway CRM"
        self.api_version = "1.0.0"
        self.environment = os.getenv("PATHWAY_ENV", "development")
        self.secret_key = os.getenv("PATHWAY_SECRET_KEY", "pathway-dev-secret-change-me-in-production")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("PATHWAY_TOKEN_MINUTES", "60"))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("PATHWAY_DATABASE_URL", "sqlite:///./pathway.db")
        self.upload_dir = os.getenv("PATHWAY_UPLOAD_DIR", "uploads")
        self.max_upload_bytes = 5 * 1024 * 1024
        self.log_level = os.getenv("PATHWAY_LOG_LEVEL", "INFO")
        self.cors_origins = [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
