"""
Application entry point.

Configuration, middleware and lifecycle management are delegated to
voucher_order.core.
"""

import logging

import sentry_sdk

from voucher_order.config.settings import get_settings
from voucher_order.core.app_factory import create_app

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

# Create application using factory
app = create_app()

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting application in {settings.ENVIRONMENT} mode")
    uvicorn.run(
        "voucher_order.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
