import logging
from datetime import date
from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "MORTGAGE_"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    api_port: int = 8000
    dashboard_port: int = 8050
    # Dash Input debounce: True fires on blur/Enter, a number waits that many seconds
    recompute_debounce: bool | float = True

    # Form defaults (dashboard + CLI)
    default_total_price: Decimal = Decimal("500000")
    default_down_payment: Decimal = Decimal("100000")
    default_interest_rate_percent: Decimal = Decimal("5")
    default_term_years: int = 25
    default_frequency: str = "monthly"
    default_lump_sum: Decimal = Decimal("0")
    default_start_date: date | None = None  # None = today

    # Chart
    chart_max_ticks: int = 3


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
