from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Form defaults applied when a request omits a field
    default_down_payment_percent: Decimal = Decimal("20")
    default_interest_rate_percent: Decimal = Decimal("7.5")
    default_loan_term_years: int = 30
    default_holding_period_months: int = 6
    default_selling_cost_percent: Decimal = Decimal("8")

    # Renovation estimator defaults
    default_house_size_sqft: Decimal = Decimal("1500")
    default_house_condition: str = "fair"
    default_region: str = "NJ"
    default_diy_level: str = "minimal"


settings = Settings()
