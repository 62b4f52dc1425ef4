from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Glass Quote Pricing API"
    APP_VERSION: str = "1.0.0"

    # tighten to the storefront domain in production
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
