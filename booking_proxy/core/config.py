from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    MEEVO_AUTH_URL: str = "https://d18devmarketplace.meevodev.com/oauth2/token"
    MEEVO_API_URL: str = "https://d18devpub.meevodev.com/publicapi/v1"
    MEEVO_CLIENT_ID: str | None = None
    MEEVO_CLIENT_SECRET: str | None = None
    MEEVO_TENANT_ID: str = "4"
    MEEVO_LOCATION_ID: str = "5"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    HTTP_TIMEOUT_SECONDS: float = 10.0
    TOKEN_SAFETY_MARGIN_SECONDS: int = 300
    CLIENT_GENDER: str = "2035"
    SERVICE_ID_STRICT: bool = False


settings = Settings()
