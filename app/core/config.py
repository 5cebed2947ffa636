import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./emporium.db"

    FRONTEND_URL: str = "http://localhost:3001"

    BACKEND_CORS_ORIGINS: str = (
        '["http://localhost:5173","http://localhost:3000","http://localhost:3001"]'
    )

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "ScribeForge Storefront API"
    DEBUG: bool = False

    # Storefronts are presented as <slug>.<suffix>
    STORE_DOMAIN_SUFFIX: str = "acdm.online"
    SEED_DEFAULT_STORE: bool = True

    RATE_LIMIT_ENABLED: bool = True
    CHECKOUT_RATE_LIMIT: str = "10/minute"
    VERIFY_RATE_LIMIT: str = "30/minute"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
