import os
from functools import lru_cache


class Settings:
    APP_NAME: str = "CashCard API"
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # По умолчанию SQLite, можно переопределить переменной окружения
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./cashcard.db"
    )

    # Пагинация
    DEFAULT_PAGE: int = 0
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 2000
    DEFAULT_SORT: str = "amount,asc"

    # Пользователи: "name:password:ROLE1,ROLE2;name2:..."
    USERS: str = os.getenv(
        "CASHCARD_USERS",
        "sarah1:abc123:CARD-OWNER;"
        "kumar2:xyz789:CARD-OWNER;"
        "hank-owns-no-cards:qrs456:NON-OWNER",
    )
    # пустая строка отключает проверку роли
    REQUIRED_ROLE: str = os.getenv("CASHCARD_REQUIRED_ROLE", "CARD-OWNER")

    # Access tokens
    JWT_SECRET: str = os.getenv("JWT_SECRET", "dev-secret-change-me")
    JWT_ALG: str = "HS256"
    ACCESS_TOKEN_TTL_SEC: int = int(os.getenv("ACCESS_TOKEN_TTL_SEC", "3600"))

    SEED_DEMO_DATA: bool = os.getenv(
        "SEED_DEMO_DATA", "1" if APP_ENV == "dev" else "0"
    ).lower() in ("1", "true", "yes")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
