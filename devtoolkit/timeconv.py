"""Conversions between Unix epoch, ISO-8601 and human-readable dates.

Epoch input is auto-detected: values above ``EPOCH_MS_THRESHOLD`` are read
as milliseconds, everything else as seconds. The threshold is a heuristic.
Ten billion seconds is 2286-11-20, ten billion milliseconds is 1970-04-26,
so second timestamps after 2286 and millisecond timestamps before late
April 1970 are misread.
"""
import logging
import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import InvalidDate, InvalidTimezone, NotANumber

logger = logging.getLogger(__name__)

EPOCH_MS_THRESHOLD = 10_000_000_000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
INTEGER = re.compile(r'[+-]?\d+')


@dataclass(frozen=True)
class TimestampValue:
    epoch_seconds: int
    epoch_millis: int
    iso_string: str
    human_string: str


def resolve_zone(tz='UTC') -> Optional[tzinfo]:
    """Map a zone name to a tzinfo; ``'local'`` maps to None (system zone)."""
    if isinstance(tz, tzinfo):
        return tz
    if tz is None or tz.upper() == 'UTC':
        return timezone.utc
    if tz.lower() == 'local':
        return None
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezone(f"Unknown timezone: {tz!r}") from e

def _in_zone(dt: datetime, zone: Optional[tzinfo]) -> datetime:
    # naive dt is wall time in zone; aware dt is converted
    try:
        if dt.tzinfo is None:
            return dt.astimezone() if zone is None else dt.replace(tzinfo=zone)
        return dt.astimezone(zone)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDate(f"Date out of range: {dt.isoformat()}") from e


# ---------- Formatting ----------
def iso_utc(dt: datetime) -> str:
    u = dt.astimezone(timezone.utc)
    return (f"{u.year:04d}-{u.month:02d}-{u.day:02d}"
            f"T{u.hour:02d}:{u.minute:02d}:{u.second:02d}.{u.microsecond // 1000:03d}Z")

def human(dt: datetime, tz='UTC') -> str:
    # en-US long form: "Monday, January 1, 2024 at 12:00:00 AM UTC"
    local = _in_zone(dt, resolve_zone(tz))
    hour = local.hour % 12 or 12
    ampm = 'AM' if local.hour < 12 else 'PM'
    return (f"{local:%A}, {local:%B} {local.day}, {local.year} at "
            f"{hour:02d}:{local.minute:02d}:{local.second:02d} {ampm} {local.tzname()}")

def _from_millis(ms: int, tz) -> TimestampValue:
    try:
        dt = EPOCH + timedelta(milliseconds=ms)
    except OverflowError as e:
        raise InvalidDate(f"Timestamp out of range: {ms} ms") from e
    return TimestampValue(
        epoch_seconds=ms // 1000,
        epoch_millis=ms,
        iso_string=iso_utc(dt),
        human_string=human(dt, tz),
    )


# ---------- Conversions ----------
def from_unix(text, tz='UTC') -> TimestampValue:
    s = str(text).strip()
    if not INTEGER.fullmatch(s):
        raise NotANumber(f"Not a number: {text!r}")
    n = int(s)
    if n > EPOCH_MS_THRESHOLD:
        logger.debug("epoch %d read as milliseconds", n)
        ms = n
    else:
        ms = n * 1000
    return _from_millis(ms, tz)

def from_iso(text: str, tz='UTC') -> TimestampValue:
    s = text.strip()
    try:
        dt = datetime.fromisoformat(s.replace('Z', '+00:00').replace('z', '+00:00'))
    except ValueError as e:
        raise InvalidDate(f"Invalid date: {text!r}") from e
    if dt.tzinfo is None:
        dt = _in_zone(dt, resolve_zone(tz))
    ms = (dt - EPOCH) // timedelta(milliseconds=1)
    return _from_millis(ms, tz)

def from_datetime(dt: datetime, tz='UTC') -> TimestampValue:
    if dt.tzinfo is None:
        dt = _in_zone(dt, resolve_zone(tz))
    return _from_millis((dt - EPOCH) // timedelta(milliseconds=1), tz)

def now(tz='UTC') -> TimestampValue:
    return _from_millis(time.time_ns() // 1_000_000, tz)
