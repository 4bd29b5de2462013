"""
Validation Module - Pure field validators used at the edit boundary
"""

import re
from datetime import date, datetime, time
from typing import Iterable, List, Optional
from urllib.parse import urlparse

HEX_COLOR_RE = re.compile(r'^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$')

# Each entry permits the host itself and any of its subdomains
ALLOWED_IMAGE_HOSTNAMES = (
    'auth0.com',
    'auth0usercontent.com',
    'googleusercontent.com',
    'imgur.com',
    'unsplash.com',
    'cloudinary.com',
    'githubusercontent.com',
    'amazonaws.com',
    'gravatar.com',
)


def validate_text_length(text: Optional[str], max_length: int, field_name: str) -> Optional[str]:
    """Return an error message when trimmed text is empty or too long"""
    trimmed = (text or '').strip()
    if len(trimmed) == 0:
        return f'{field_name} cannot be empty'
    if len(trimmed) > max_length:
        return f'{field_name} must be {max_length} characters or less'
    return None


def is_valid_url(url: Optional[str]) -> bool:
    """Blank is valid (the field is optional); otherwise absolute http(s)"""
    if not url or not url.strip():
        return True
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def is_valid_hex_color(color: Optional[str]) -> bool:
    return bool(color) and HEX_COLOR_RE.fullmatch(color) is not None


def parse_date(value):
    """Parse an ISO date or datetime into a naive local datetime, or None"""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    else:
        try:
            parsed = datetime.fromisoformat(str(value).strip())
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def validate_date_range(start_date, end_date=None) -> Optional[str]:
    """Start must not be in the future; end, when given, must fall between
    start and the end of today. Equal dates are accepted."""
    if not start_date:
        return None

    start = parse_date(start_date)
    if start is None:
        return 'Invalid date'
    end_of_today = datetime.combine(date.today(), time.max)

    if start > end_of_today:
        return 'Start date cannot be in the future'

    if end_date:
        end = parse_date(end_date)
        if end is None:
            return 'Invalid date'
        if end < start:
            return 'End date must be after start date'
        if end > end_of_today:
            return 'End date cannot be in the future'

    return None


def is_image_url_allowed(url) -> bool:
    """Check the URL's host against the image allow-list"""
    if not isinstance(url, str):
        return False
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError:
        return False
    if not parsed.scheme or not hostname:
        return False
    hostname = hostname.lower()
    return any(
        hostname == allowed or hostname.endswith(f'.{allowed}')
        for allowed in ALLOWED_IMAGE_HOSTNAMES
    )


def filter_valid_image_urls(urls: Iterable) -> List[str]:
    return [
        url for url in (urls or [])
        if isinstance(url, str) and url.strip() and is_image_url_allowed(url)
    ]


def parse_comma_separated(value: Optional[str]) -> List[str]:
    """'a, b,,c ' -> ['a', 'b', 'c']"""
    return [item.strip() for item in (value or '').split(',') if item.strip()]


__all__ = [
    'ALLOWED_IMAGE_HOSTNAMES',
    'validate_text_length',
    'is_valid_url',
    'is_valid_hex_color',
    'parse_date',
    'validate_date_range',
    'is_image_url_allowed',
    'filter_valid_image_urls',
    'parse_comma_separated'
]
