"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = "Office Lunch Pre-Order API"
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    database_url: str = getenv("DATABASE_URL", "sqlite:///./preorder.db")
    timezone_name: str = getenv("APP_TIMEZONE", "Asia/Taipei")
    order_lead_days: int = int(getenv("ORDER_LEAD_DAYS", "1"))
    customer_days_ahead: int = int(getenv("CUSTOMER_DAYS_AHEAD", "7"))
    history_limit: int = int(getenv("MENU_HISTORY_LIMIT", "0"))


settings: Settings = Settings()
