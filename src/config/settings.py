"""
Configuration settings for the Sales API
"""

import os
import logging

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SEED_SAMPLE_DATA = os.getenv("SEED_SAMPLE_DATA", "true").lower() in ("1", "true", "yes")

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

logger.info(f"Environment: {ENV}")
if not SEED_SAMPLE_DATA:
    logger.warning("SEED_SAMPLE_DATA disabled - store will start empty")
