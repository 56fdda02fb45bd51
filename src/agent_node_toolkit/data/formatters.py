"""Formatters for preparing data for display or transmission."""

import calendar
import json
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from ..config import settings

# (thousands separator, decimal separator)
_SEPARATORS: dict[str, tuple[str, str]] = {
    "en-US": (",", "."),
    "en-GB": (",", "."),
    "de-DE": (".", ","),
    "es-ES": (".", ","),
    "it-IT": (".", ","),
    "fr-FR": (" ", ","),
}

_CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CNY": "CN¥",
    "CAD": "CA$",
    "AUD": "A$",
}

# ISO 4217 minor units where they differ from 2
_CURRENCY_DECIMALS: dict[str, int] = {"JPY": 0, "KRW": 0}

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


@dataclass
class FormattingOptions:
    """Options for formatting values; defaults come from settings."""

    decimals: int = field(default_factory=lambda: settings.format_decimals)
    date_format: str = "short"
    include_time: bool = False
    locale: str = field(default_factory=lambda: settings.default_locale)
    truncate_length: int | None = field(default_factory=lambda: settings.truncate_length)
    truncation_suffix: str = field(default_factory=lambda: settings.truncation_suffix)


def to_text(value: Any) -> str:
    """Render a scalar or list the way it appears inside generated text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def format_value(value: Any, options: FormattingOptions | None = None) -> str:
    """Format a value based on its type."""
    opts = options or FormattingOptions()

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value, opts)
    if isinstance(value, (datetime, date)):
        return format_date(value, opts)
    if isinstance(value, str):
        return format_string(value, opts)
    if isinstance(value, (list, tuple)):
        return format_array(list(value), opts)
    if isinstance(value, dict):
        return format_object(value, opts)
    return str(value)


def _group_number(value: float, decimals: int, locale: str) -> str:
    thousands, point = _SEPARATORS.get(locale, _SEPARATORS["en-US"])
    formatted = f"{value:,.{decimals}f}"
    return formatted.replace(",", "\0").replace(".", point).replace("\0", thousands)


def format_number(value: float, options: FormattingOptions | None = None) -> str:
    """Format a number with grouping and a fixed number of decimals."""
    opts = options or FormattingOptions()
    return _group_number(value, opts.decimals, opts.locale)


def format_date(value: date, options: FormattingOptions | None = None) -> str:
    """Format a date in one of the short/medium/long/full styles."""
    opts = options or FormattingOptions()
    month = value.month
    day = value.day
    year = value.year

    if opts.date_format == "short":
        text = f"{month}/{day}/{year % 100:02d}"
    elif opts.date_format == "medium":
        text = f"{calendar.month_abbr[month]} {day}, {year}"
    elif opts.date_format == "long":
        text = f"{calendar.month_name[month]} {day}, {year}"
    elif opts.date_format == "full":
        text = f"{calendar.day_name[value.weekday()]}, {calendar.month_name[month]} {day}, {year}"
    else:
        text = f"{month}/{day}/{year}"

    if opts.include_time and isinstance(value, datetime):
        hour = value.hour % 12 or 12
        meridiem = "AM" if value.hour < 12 else "PM"
        text = f"{text}, {hour}:{value.minute:02d} {meridiem}"

    return text


def format_string(value: str, options: FormattingOptions | None = None) -> str:
    """Truncate a string that exceeds the configured length."""
    opts = options or FormattingOptions()
    if opts.truncate_length and len(value) > opts.truncate_length:
        return value[: opts.truncate_length] + opts.truncation_suffix
    return value


def format_array(value: list[Any], options: FormattingOptions | None = None) -> str:
    return ", ".join(format_value(item, options) for item in value)


def format_object(value: dict[str, Any], options: FormattingOptions | None = None) -> str:
    """Pretty print an object as indented JSON."""
    try:
        return json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError):
        return str(value)


def format_byte_size(size: float) -> str:
    """Format a byte count into a human-readable string, e.g. ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"

    index = 0
    scaled = float(size)
    while scaled >= 1024 and index < len(_BYTE_UNITS) - 1:
        scaled /= 1024
        index += 1

    text = f"{scaled:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_BYTE_UNITS[index]}"


def format_duration(milliseconds: int) -> str:
    """Format a duration in milliseconds, e.g. ``1h 2m 3s``."""
    if milliseconds < 1000:
        return f"{milliseconds}ms"

    seconds = int(milliseconds // 1000)
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days}d {hours % 24}h {minutes % 60}m {seconds % 60}s"
    if hours > 0:
        return f"{hours}h {minutes % 60}m {seconds % 60}s"
    if minutes > 0:
        return f"{minutes}m {seconds % 60}s"
    return f"{seconds}s"


def format_percentage(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_currency(value: float, currency: str | None = None, locale: str | None = None) -> str:
    """Format a monetary amount, e.g. ``$1,234.50`` or ``-€3.00``.

    Unknown currency codes are written as a prefix: ``CHF 10.00``.
    """
    currency = (currency or settings.default_currency).upper()
    locale = locale or settings.default_locale
    decimals = _CURRENCY_DECIMALS.get(currency, 2)

    amount = _group_number(abs(value), decimals, locale)
    symbol = _CURRENCY_SYMBOLS.get(currency)
    text = f"{symbol}{amount}" if symbol else f"{currency} {amount}"
    return f"-{text}" if value < 0 else text


def format_for_csv(value: Any) -> str:
    """Format a value for a CSV cell, quoting when needed."""
    if value is None:
        return ""

    text = to_text(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def format_phone_number(phone_number: str, country_code: str = "1") -> str:
    """Normalize a phone number.

    Ten-digit North American numbers become ``(555) 123-4567``; anything else
    gets a ``+<country code>`` prefix.
    """
    digits = re.sub(r"\D", "", phone_number)

    if country_code == "1" and len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"

    if digits:
        if digits.startswith(country_code):
            return f"+{digits}"
        return f"+{country_code}{digits}"

    return phone_number
