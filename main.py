"""
chatrelay: credential-isolating chat completion relay

Main entry point for the application.
"""

from pydantic import ValidationError

from chatrelay.logging_config import setup_logging
from chatrelay.config import RelaySettings
from chatrelay.api import create_app

# Default logging until settings are loaded, so a bad config is reported
logger = setup_logging()

try:
    settings = RelaySettings()
except ValidationError as e:
    logger.error(f"Invalid configuration: {e.error_count()} error(s)")
    logger.info("Set OPENAI_API_KEY in the environment or a .env file")
    raise

logger = setup_logging(settings.LOG_LEVEL)

# Create FastAPI app (settings are read once, here)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
