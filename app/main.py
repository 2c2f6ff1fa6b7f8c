"""
Application entry point.

Runs the vaccine reminder worker: configures logging and error tracking,
checks the messaging provider and keeps the daily reminder scheduler alive
until interrupted.

    python -m app.main
"""

import asyncio
import logging

import sentry_sdk

from app.config.settings import get_settings
from app.core.container import get_container
from app.core.shared.logger import configure_logging
from app.database.async_db import dispose_engine

settings = get_settings()
configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

logger = logging.getLogger(__name__)

if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )


async def run_worker() -> None:
    container = get_container()
    reminders = container.vaccine_reminders

    status = await reminders.create_check_messaging_connection_use_case().execute()
    if not status.connected:
        logger.warning("Starting without a working WhatsApp connection; reminder sends will fail")

    scheduler = reminders.create_reminder_scheduler()
    scheduler.start()

    try:
        await asyncio.Event().wait()
    finally:
        scheduler.stop()
        await container.close()
        await dispose_engine()


def main() -> None:
    logger.info(f"Starting vaccine reminder worker in {settings.ENVIRONMENT} mode")
    try:
        asyncio.run(run_worker())
    except KeyboardInterrupt:
        logger.info("Worker stopped")


if __name__ == "__main__":
    main()
