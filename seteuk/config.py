"""
Configuration management for SeTeuk Master.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base paths
BASE_DIR = Path(__file__).parent.parent
PACKAGE_DIR = Path(__file__).parent
STATIC_DIR = PACKAGE_DIR / "static"

# API Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", "")

# Model configuration (fixed, part of the output contract)
GEMINI_MODEL = "gemini-2.5-flash"
GEMINI_TEMPERATURE = 0.6
RESPONSE_MIME_TYPE = "application/json"

# Server configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

# Upload configuration
DEFAULT_MIME_TYPE = "application/octet-stream"
TEXT_FILE_EXTENSIONS = ('.txt',)
ACCEPTED_UPLOAD_TYPES = "image/*,audio/*,.pdf,.ppt,.pptx,.txt"
FILE_READ_WORKERS = 4

# Length options shown in the form (first is the default)
LENGTH_OPTIONS = [
    "표준 (1500바이트/500자 내외)",
    "짧게 (1000바이트/300자 내외)",
    "길게 (2000바이트/700자 내외)",
]
DEFAULT_LENGTH_OPTION = LENGTH_OPTIONS[0]


class Config:
    """Application configuration class."""

    def __init__(self):
        self.gemini_api_key = GEMINI_API_KEY
        self.model = GEMINI_MODEL
        self.temperature = GEMINI_TEMPERATURE

    def to_dict(self):
        return {
            "model": self.model,
            "temperature": self.temperature,
            "api_key_configured": bool(self.gemini_api_key),
        }


# Global config instance
config = Config()
