from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"

    card_file: str = "data/cards.json"
    transaction_file: str = "data/transactions.json"
    catalog_file: str = "data/categories.json"

    assumed_baseline_rate: float = 1.5
    tip_min_monthly_spend: float = 100
    tip_max_categories: int = 3

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CARDPICK_",
        extra="ignore",
    )


settings = Settings()
