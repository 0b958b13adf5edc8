"""Configuration management for bucket-tester."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Logging and tracing settings with environment variable support.

    Bucket, credentials and region are never read from here; they are
    supplied on the command line for each run.
    """

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "bucket-tester"

    model_config = {
        "env_prefix": "BUCKET_TESTER_",
        "case_sensitive": False,
    }


settings = Settings()
