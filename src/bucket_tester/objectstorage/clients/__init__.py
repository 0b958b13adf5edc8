"""S3 client management and configuration."""

from .s3_client import DEFAULT_REGION, S3ClientConfig, S3ClientManager

__all__ = ["DEFAULT_REGION", "S3ClientConfig", "S3ClientManager"]
