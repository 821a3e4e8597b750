from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "KhelMela"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    SEED_ON_STARTUP: bool = True  # Load fixture data when the store is created

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = False

    SUPPORT_EMAIL: str = "support@khelmela.com"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
