# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagparse."""
import logging

logger: logging.Logger = logging.getLogger("flagparse")
