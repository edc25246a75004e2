"""
Configuration management for evidence scoring.

Centralizes environment variable loading and application settings.
"""

import os
import logging

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Defaults for settings the scoring modules also use as parameter defaults
DEFAULT_TOP_LIMIT = 20
DEFAULT_LINK_RATIO = 0.5


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Application configuration."""

    # Ranking
    TOP_RELEVANT_LIMIT: int = int(os.getenv("TOP_RELEVANT_LIMIT", str(DEFAULT_TOP_LIMIT)))
    # Below this fraction of linked candidates a task claim needs more evidence
    EVIDENCE_LINK_RATIO: float = float(os.getenv("EVIDENCE_LINK_RATIO", str(DEFAULT_LINK_RATIO)))

    # Validation
    STRICT_DOMAIN_CHECKS: bool = _env_flag("STRICT_DOMAIN_CHECKS")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration and return any issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if cls.TOP_RELEVANT_LIMIT < 1:
            issues.append("TOP_RELEVANT_LIMIT must be at least 1")

        if not 0.0 <= cls.EVIDENCE_LINK_RATIO <= 1.0:
            issues.append("EVIDENCE_LINK_RATIO must be between 0 and 1")

        return issues

    @classmethod
    def setup_logging(cls, level: str | None = None):
        """
        Configure application logging.

        Args:
            level: Optional override for log level
        """
        log_level = level or cls.LOG_LEVEL

        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=cls.LOG_FORMAT,
        )

