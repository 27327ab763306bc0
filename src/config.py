"""Configuration settings for the product catalog services."""

import os


def get_products_bucket():
    """Get the bucket holding product records, or None if not configured."""
    return os.environ.get("PRODUCTS_BUCKET") or None


def get_product_events_channel():
    """Get the Redis channel for product events, or None if not configured."""
    return os.environ.get("PRODUCT_EVENTS_CHANNEL") or None


def get_notification_addresses():
    """Get sender and recipient email addresses from environment variables."""
    return dict(
        sender=os.environ.get("SENDER_EMAIL_ADDRESS") or None,
        recipient=os.environ.get("RECIPIENT_EMAIL_ADDRESS") or None,
    )


def get_redis_host_and_port():
    """Get Redis connection details from environment variables."""
    host = os.environ.get("REDIS_HOST", "localhost")
    port = int(os.environ.get("REDIS_PORT", 6379))
    return dict(host=host, port=port)


def get_minio_config():
    """Get MinIO connection configuration from environment variables."""
    host = os.environ.get("MINIO_HOST", "localhost")
    access_key = os.environ.get("MINIO_ACCESS_KEY", "minioadmin")
    secret_key = os.environ.get("MINIO_SECRET_KEY", "minioadmin123")
    secure = os.environ.get("MINIO_SECURE", "false").lower() == "true"

    return dict(
        endpoint=f"{host}:9000",
        access_key=access_key,
        secret_key=secret_key,
        secure=secure
    )


def get_email_config():
    """Get outbound email transport configuration from environment variables."""
    return dict(
        backend=os.environ.get("EMAIL_BACKEND", "http").lower(),
        api_url=os.environ.get("EMAIL_API_URL", "http://localhost:8025/v3/mail"),
        api_key=os.environ.get("EMAIL_API_KEY", ""),
        timeout=float(os.environ.get("EMAIL_API_TIMEOUT", 10)),
    )


def get_batch_config():
    """Get subscriber batching settings from environment variables."""
    return dict(
        max_size=int(os.environ.get("NOTIFICATION_BATCH_SIZE", 10)),
        wait_seconds=float(os.environ.get("NOTIFICATION_BATCH_WAIT_SECONDS", 1.0)),
    )


def get_api_url():
    """Get API URL from environment variables."""
    host = os.environ.get("API_HOST", "localhost")
    return f"http://{host}:8000"
