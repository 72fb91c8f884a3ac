import logging
import os
from dotenv import load_dotenv

load_dotenv()


def resolve_log_level(name: str) -> int:
    """Map a level name to a logging level, falling back to INFO."""
    level = logging.getLevelName((name or '').strip().upper())
    return level if isinstance(level, int) else logging.INFO


# CORS origin for the chat widget
ALLOWED_ORIGIN = os.getenv('CHATBOT_ALLOWED_ORIGIN', '*')
LOG_LEVEL = resolve_log_level(os.getenv('CHATBOT_LOG_LEVEL', 'INFO'))
