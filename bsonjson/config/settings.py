"""Configuration settings for bsonjson."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Logging settings
LOG_LEVEL = os.getenv("BSONJSON_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv(
    "BSONJSON_LOG_FORMAT",
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
