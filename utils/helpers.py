import math

VOLUME_MUTED = "muted"
VOLUME_LOW = "low"
VOLUME_HIGH = "high"


def format_time(seconds):
    """Format seconds as M:SS; unknown or invalid values render as 0:00."""
    if seconds is None:
        return "0:00"
    try:
        seconds = float(seconds)
    except (TypeError, ValueError):
        return "0:00"
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
        return "0:00"
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins}:{secs:02d}"


def volume_tier(percent):
    if percent <= 0:
        return VOLUME_MUTED
    elif percent < 50:
        return VOLUME_LOW
    return VOLUME_HIGH


def clamp_fraction(fraction):
    if fraction is None or math.isnan(fraction):
        return 0.0
    return min(1.0, max(0.0, float(fraction)))


def fraction_from_position(x, width):
    """Convert a click offset on a horizontal bar into a [0, 1] fraction."""
    if width <= 0:
        return 0.0
    return clamp_fraction(x / width)


def progress_percent(position_ms, duration_ms):
    if not duration_ms or duration_ms <= 0:
        return 0.0
    return clamp_fraction(position_ms / duration_ms) * 100
