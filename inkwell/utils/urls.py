from typing import Optional
from urllib.parse import urlparse


def is_http_url(value: Optional[str]) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not value:
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
