from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DB_USER: str = "tracker"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "tracker"
    # Full URL override, e.g. sqlite:///./tracker.db for local runs
    DATABASE_URL: str | None = None

    FRONTEND_URL: str = "http://localhost:5173"
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    SESSION_TTL_DAYS: int = 30
    DUPLICATE_INSERT_PAUSE_SECONDS: float = 0.01

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
