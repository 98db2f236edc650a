from pydantic_settings import BaseSettings

from .pricing_engine import BusinessConfig


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./quotes.db"
    COMPANY_NAME: str = "Eventorga"
    COMPANY_EMAIL: str = ""
    COMPANY_PHONE: str = ""
    QUOTE_VALID_DAYS: int = 30

    # Business configuration defaults — overridable per request
    DEFAULT_LIFESPAN_YEARS: float = 10
    DEFAULT_ANNUAL_USAGE_FREQUENCY: float = 5
    DEFAULT_BREAKAGE_RATE: float = 0.02
    DEFAULT_OVERHEAD_RATE: float = 0.10
    DEFAULT_MARGIN_RATE: float = 0.35
    DEFAULT_VAT_RATE: float = 0.21

    class Config:
        env_file = ".env"

    def default_business_config(self) -> BusinessConfig:
        return BusinessConfig(
            lifespan_years=self.DEFAULT_LIFESPAN_YEARS,
            annual_usage_frequency=self.DEFAULT_ANNUAL_USAGE_FREQUENCY,
            breakage_rate=self.DEFAULT_BREAKAGE_RATE,
            overhead_rate=self.DEFAULT_OVERHEAD_RATE,
            margin_rate=self.DEFAULT_MARGIN_RATE,
            vat_rate=self.DEFAULT_VAT_RATE,
        )


settings = Settings()
