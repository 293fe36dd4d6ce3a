from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_USER: str = "portfolio"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "portfolio"
    # Full SQLAlchemy URL; takes precedence over the DB_* parts when set
    DATABASE_URL: str | None = None

    ADMIN_PASSWORD: str
    ADMIN_EDIT_PASSWORD: str | None = None
    SESSION_TTL_HOURS: int = 12
    SESSION_COOKIE_NAME: str = "admin_token"

    MEDIA_DIR: str = "uploads"
    MEDIA_URL_PATH: str = "/uploads"

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"

settings = Settings()
