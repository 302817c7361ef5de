import datetime


def format_date(timestamp: float) -> str:
    """
    Format a Unix timestamp as a local calendar date.

    Args:
        timestamp: Seconds since the epoch

    Returns:
        Date string like "2026-10-19"
    """
    return datetime.datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d")


def format_clock(timestamp: float) -> str:
    """Local date and time for the clock label"""
    return datetime.datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
