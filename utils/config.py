# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

import logging
import os

from datetime import tzinfo
from dateutil import tz
from dotenv import load_dotenv

from utils.constants import (DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT,
                             USGS_REQUEST_URL)

# Configure logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


load_dotenv()


def _float_env(name: str, default: float) -> float:
    value = os.environ.get(name, "")
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", name, value)
        return default


class Config:
    """
    Configuration class for managing environment variables and application settings.
    Provides a centralized location for all configuration values.

    Environment Variables:
        SOONAMI_REQUEST_URL: Earthquake feed endpoint (default: USGS query)
        SOONAMI_CONNECT_TIMEOUT: Connect timeout in seconds (default: 15)
        SOONAMI_READ_TIMEOUT: Read timeout in seconds (default: 10)
        SOONAMI_TIMEZONE: Timezone name used to format dates (default: local)
        SOONAMI_LOG_LEVEL: Logging level name (default: INFO)

    Example:
        Access configuration values:
            url = Config.REQUEST_URL
            zone = Config.get_timezone()
    """

    # Feed settings
    REQUEST_URL: str = os.environ.get("SOONAMI_REQUEST_URL", USGS_REQUEST_URL)

    # HTTP timeout settings
    CONNECT_TIMEOUT: float = _float_env("SOONAMI_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT)
    READ_TIMEOUT: float = _float_env("SOONAMI_READ_TIMEOUT", DEFAULT_READ_TIMEOUT)

    # Display settings
    TIMEZONE: str = os.environ.get("SOONAMI_TIMEZONE", "")

    LOG_LEVEL: str = os.environ.get("SOONAMI_LOG_LEVEL", "INFO").upper()

    @classmethod
    def get_timezone(cls, name: str = None) -> tzinfo:
        """
        Resolve a timezone name to a tzinfo.

        Args:
            name: Timezone name such as "UTC" or "America/Los_Angeles";
                  defaults to TIMEZONE, and to the local zone when empty

        Returns:
            tzinfo for the named zone

        Raises:
            ValueError: If the name is not a known timezone
        """
        name = cls.TIMEZONE if name is None else name
        if not name:
            return tz.tzlocal()

        zone = tz.gettz(name)
        if zone is None:
            raise ValueError("Unknown timezone: %s" % name)
        return zone

    @classmethod
    def validate(cls):
        """
        Validate configuration values.

        Raises:
            ValueError: If a configuration value is invalid
        """
        if cls.CONNECT_TIMEOUT <= 0:
            raise ValueError("SOONAMI_CONNECT_TIMEOUT must be positive")

        if cls.READ_TIMEOUT <= 0:
            raise ValueError("SOONAMI_READ_TIMEOUT must be positive")

        cls.get_timezone()

        if not cls.REQUEST_URL.lower().startswith("https://"):
            logger.warning("REQUEST_URL is not using https: %s", cls.REQUEST_URL)

        logger.info("Configuration validated successfully")
