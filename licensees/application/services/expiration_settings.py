"""
Caller-side defaults for expiration queries.
"""
from typing import Optional, Union

from django.conf import settings

FALLBACK_HORIZON_DAYS = 30


def default_horizon_days() -> int:
    """Configured look-ahead, falling back to 30 days."""
    configured = getattr(settings, "LICENSEE_MANAGER", {}).get("EXPIRATION_HORIZON_DAYS")
    if isinstance(configured, int) and configured > 0:
        return configured
    return FALLBACK_HORIZON_DAYS


def resolve_horizon_days(horizon_days: Optional[Union[int, str]]) -> int:
    """
    Substitute the default horizon for absent or non-positive input.

    Args:
        horizon_days: Requested horizon, may be None or a numeric string

    Returns:
        A positive number of days

    Raises:
        ValueError: If horizon_days is not a whole number
    """
    if horizon_days is None:
        return default_horizon_days()
    if isinstance(horizon_days, (bool, float)):
        raise ValueError(f"horizon_days must be a whole number, got {horizon_days!r}")
    try:
        days = int(horizon_days)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"horizon_days must be a whole number, got {horizon_days!r}") from exc
    if days <= 0:
        return default_horizon_days()
    return days
