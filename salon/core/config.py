from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_NAME: str = "Beauty Salon"

    STORE_PROVIDER: str = "memory"
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE: str | None = None
    SUPABASE_BOOKINGS_TABLE: str = "bookings"

    REJECT_UNKNOWN_SERVICES: bool = False

    BREVO_API_KEY: str | None = None
    BREVO_ENDPOINT: str = "https://api.brevo.com/v3/smtp/email"
    ADMIN_EMAIL: str = "admin@example.com"
    EMAIL_FROM: str = "bookings@example.com"
    SITE_URL: str = "http://localhost:5173"

    ADMIN_API_KEY: str | None = None


settings = Settings()
