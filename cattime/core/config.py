# cattime/core/config.py
from pydantic_settings import BaseSettings; from dotenv import load_dotenv
load_dotenv()
class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./cattime.db"
    JWT_SECRET_KEY: str; JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    LOG_LEVEL: str = "INFO"
    # Days before today whose closed records still count as the current session
    RECENT_WORKING_TIME_DAYS: int = 1
    VALIDATE_END_ON_CREATE: bool = False
    FIRST_ADMIN_EMAIL: str | None = None; FIRST_ADMIN_PASSWORD: str | None = None
    FIRST_ADMIN_COMPANY_ID: int = 1
settings = Settings()
