"""
Environment configuration for the LinkedIn token strategy.

All settings loaded from .env file or environment variables.
See .env.example for available options.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from the backend directory
load_dotenv(Path(__file__).parent.parent / ".env")

# LinkedIn application credentials (required to build a strategy from config)
LINKEDIN_CONSUMER_KEY = os.getenv("LINKEDIN_CONSUMER_KEY")
LINKEDIN_CONSUMER_SECRET = os.getenv("LINKEDIN_CONSUMER_SECRET")

# Profile fields to request, comma separated (e.g. "id,name,emails")
# Empty means LinkedIn's stock field set
LINKEDIN_PROFILE_FIELDS = [
    f.strip() for f in os.getenv("LINKEDIN_PROFILE_FIELDS", "").split(",") if f.strip()
]

# Pass the incoming request as first argument of the verify callback
LINKEDIN_PASS_REQ_TO_CALLBACK = os.getenv("LINKEDIN_PASS_REQ_TO_CALLBACK", "false").lower() == "true"

# Timeout in seconds for the profile request
LINKEDIN_HTTP_TIMEOUT = float(os.getenv("LINKEDIN_HTTP_TIMEOUT", "10"))

# Log level for the linkedin_token logger hierarchy
# Unknown level names fall back to INFO
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_log_level(value: str) -> str:
    level = (value or "").strip().upper()
    return level if level in LOG_LEVELS else "INFO"


LINKEDIN_TOKEN_LOG_LEVEL = parse_log_level(os.getenv("LINKEDIN_TOKEN_LOG_LEVEL", "INFO"))
