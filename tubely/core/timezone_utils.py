"""
Timezone utilities for the Tubely thumbnail service.

Record timestamps are stored in UTC; the configured timezone is only used
for display.
"""

import datetime
import pytz
import logging
from typing import Optional


class TimezoneManager:
    """Manages timezone-aware datetime operations"""

    def __init__(self, timezone_name: str = "UTC"):
        self.timezone_name = timezone_name
        self.timezone = pytz.timezone(timezone_name)
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"Timezone manager initialized for {timezone_name}")

    def now(self) -> datetime.datetime:
        """Get current time in the configured timezone"""
        return datetime.datetime.now(self.timezone)

    def utc_now(self) -> datetime.datetime:
        """Get current UTC time"""
        return datetime.datetime.now(pytz.UTC)

    def to_local(self, dt: datetime.datetime) -> datetime.datetime:
        """Convert datetime to local timezone"""
        if dt.tzinfo is None:
            # Assume UTC if no timezone info
            dt = pytz.UTC.localize(dt)
        return dt.astimezone(self.timezone)

    def format_timestamp(self, dt: Optional[datetime.datetime] = None,
                         include_timezone: bool = True) -> str:
        """Format datetime as timestamp string"""
        if dt is None:
            dt = self.now()
        dt = self.to_local(dt)

        if include_timezone:
            return dt.strftime("%Y-%m-%d %H:%M:%S %Z")
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def parse_timestamp(self, timestamp_str: str) -> datetime.datetime:
        """Parse an ISO or 'YYYY-MM-DD HH:MM:SS' timestamp; naive values are taken as UTC"""
        try:
            dt = datetime.datetime.fromisoformat(timestamp_str)
        except ValueError:
            try:
                dt = datetime.datetime.strptime(timestamp_str, "%Y-%m-%d %H:%M:%S")
            except ValueError:
                raise ValueError(f"Unable to parse timestamp: {timestamp_str}")

        if dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        return dt


service_tz = TimezoneManager("UTC")


def configure_timezone(timezone_name: str) -> TimezoneManager:
    """Switch the display timezone used by the service"""
    global service_tz
    service_tz = TimezoneManager(timezone_name)
    return service_tz


def now_utc() -> datetime.datetime:
    """Get current UTC time"""
    return service_tz.utc_now()


def parse_timestamp(timestamp_str: str) -> datetime.datetime:
    return service_tz.parse_timestamp(timestamp_str)


def format_timestamp(dt: Optional[datetime.datetime] = None) -> str:
    """Format timestamp in the configured timezone"""
    return service_tz.format_timestamp(dt)
