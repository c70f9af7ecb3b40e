# app/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str | None = "review-sentiment-api"

    FRONTEND_ORIGIN: str | None = None

    # Stand-in for a real model inference call
    INFERENCE_DELAY_SECONDS: float = 2.0
    # Caller-side bound around the inference call
    ANALYZE_TIMEOUT_SECONDS: float = 10.0
    ANALYZE_RATE_LIMIT: str = "30/minute"
    MAX_BATCH_SIZE: int = 100

    RANDOM_CONTRIBUTIONS: bool = False
    LEMMATIZER: str = "passthrough"  # "passthrough" | "wordnet"

    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    BETTERSTACK_HOST: str | None = None  # PRODUCTION MODE ONLY

    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str | None = None
    OTEL_SERVICE_VERSION: str | None = None
    OTEL_SAMPLE_RATIO: str | None = None
    OTEL_ENABLE_METRICS: str | None = None

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
