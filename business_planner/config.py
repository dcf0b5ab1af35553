"""
Configuration management for the Business Planner MCP Server
Environment-based configuration, read once at import time
"""

import os
from pathlib import Path

# Tool suites, in listing order
SUITES = (
    "business-consultant",
    "document-generation",
    "knowledge-base",
    "market-research",
    "orchestration",
)


def _parse_suites(raw: str) -> tuple[str, ...]:
    names = [s.strip() for s in raw.split(",") if s.strip()]
    return tuple(names) if names else SUITES


class Config:
    """Server configuration with environment variable support"""

    # Server metadata
    SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "business-planner")
    SERVER_VERSION: str = os.getenv("MCP_SERVER_VERSION", "1.0.0")

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Saved plans land here, relative to the working directory unless absolute
    OUTPUT_DIR: Path = Path(os.getenv("BUSINESS_PLAN_OUTPUT_DIR", "generated-business-plans"))

    # Features
    ENABLE_LOGGING: bool = os.getenv("ENABLE_LOGGING", "true").lower() == "true"
    ENABLED_SUITES: tuple[str, ...] = _parse_suites(os.getenv("ENABLED_SUITES", ""))

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        errors = []

        unknown = [s for s in cls.ENABLED_SUITES if s not in SUITES]
        if unknown:
            errors.append(f"Unknown tool suites: {', '.join(unknown)} (expected any of {', '.join(SUITES)})")

        if cls.OUTPUT_DIR.exists() and not cls.OUTPUT_DIR.is_dir():
            errors.append(f"Output path is not a directory: {cls.OUTPUT_DIR}")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True

    @classmethod
    def display(cls) -> str:
        """Display configuration (for debugging)"""
        return f"""
Business Planner MCP Server Configuration
=========================================
Server: {cls.SERVER_NAME} v{cls.SERVER_VERSION}
Environment: {cls.ENVIRONMENT}
Debug: {cls.DEBUG}

Paths:
  Output directory: {cls.OUTPUT_DIR}

Features:
  Logging: {cls.ENABLE_LOGGING}
  Suites: {', '.join(cls.ENABLED_SUITES)}
=========================================
"""
