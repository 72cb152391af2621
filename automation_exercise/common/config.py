"""Suite configuration read from the environment (and a local .env file)."""

import os
from typing import Dict, Optional

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration management."""

    # Target environment; utils.environment validates it and maps it to hosts
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "staging")

    # Explicit hosts win over the ENVIRONMENT mapping
    BASE_URL: Optional[str] = os.getenv("BASE_URL") or None
    API_BASE_URL: Optional[str] = os.getenv("API_BASE_URL") or None

    # Playwright settings
    BROWSER: str = os.getenv("BROWSER", "chromium")
    HEADLESS: bool = os.getenv("HEADLESS", "true").lower() == "true"
    SLOW_MO: int = int(os.getenv("SLOW_MO", "0"))
    ACTION_TIMEOUT: int = int(os.getenv("ACTION_TIMEOUT", "30000"))
    NAVIGATION_TIMEOUT: int = int(os.getenv("NAVIGATION_TIMEOUT", "60000"))
    VIEWPORT: Dict[str, int] = {
        "width": int(os.getenv("VIEWPORT_WIDTH", "1280")),
        "height": int(os.getenv("VIEWPORT_HEIGHT", "720")),
    }

    # Live specs hit the real site; unit tests never do
    RUN_LIVE_TESTS: bool = os.getenv("RUN_LIVE_TESTS", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # No file unless asked for
    LOG_FILE: Optional[str] = os.getenv("LOG_FILE", "")

    @classmethod
    def to_dict(cls):
        """Return config as dict."""
        return {
            "environment": cls.ENVIRONMENT,
            "base_url": cls.BASE_URL,
            "api_base_url": cls.API_BASE_URL,
            "browser": cls.BROWSER,
            "headless": cls.HEADLESS,
            "slow_mo": cls.SLOW_MO,
            "action_timeout": cls.ACTION_TIMEOUT,
            "navigation_timeout": cls.NAVIGATION_TIMEOUT,
            "viewport": dict(cls.VIEWPORT),
            "run_live_tests": cls.RUN_LIVE_TESTS,
            "log_level": cls.LOG_LEVEL,
            "log_file": cls.LOG_FILE,
        }
