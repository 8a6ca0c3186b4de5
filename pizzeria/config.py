from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    customer_name: str = "Jayan Perera"
    currency: str = "LKR"

    # Pricing (seasonal discount applies to base + toppings, add-ons are added after it)
    base_price: float = 1400.0
    topping_price: float = 50.0
    extra_cheese_price: float = 200.0
    special_packaging_price: float = 100.0
    seasonal_discount: float = 0.10

    loyalty_points_per_order: int = 10

    log_level: str = "WARNING"  # logs share stdout with the console prompts
    metrics_port: int | None = None  # Prometheus exporter; disabled when unset

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
