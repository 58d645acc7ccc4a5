"""Regex extraction rules for WhitePages reverse lookup pages.

The remote markup is not under our control, so every rule is a plain
``str -> str | None`` function. ``PageExtractors`` groups one function per
field; swap a single field with ``dataclasses.replace`` when the site changes.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

FieldExtractor = Callable[[str], str | None]

# Tried in order, first match wins
COOKIE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"distil_RID=([A-Za-z0-9\-]+)", re.DOTALL),
    re.compile(r"PID=([A-Za-z0-9\-]+)", re.DOTALL),
)

_NAME_RE = re.compile(r"<h2.*?>Send (.*?)&#39;s details to phone</h2>", re.DOTALL)
_SUMMARY_RE = re.compile(
    r"<span\s*class=\"subtitle.*?>\s*\n?(.*?)\n?\s*</span>", re.DOTALL
)
_PHONE_NUMBER_RE = re.compile(r"Full Number:</span>([0-9\-+() ]+)</li>", re.DOTALL)

_ADDRESS_TEMPLATE = r"<span\s+class=\"{}[^\"]*\"\s*>([^<]*)</span>"


def _search(pattern: re.Pattern[str], html: str) -> str | None:
    m = pattern.search(html)
    return m.group(1).strip() if m else None


def _address_extractor(css_class: str) -> FieldExtractor:
    pattern = re.compile(_ADDRESS_TEMPLATE.format(re.escape(css_class)), re.DOTALL)

    def extract(html: str) -> str | None:
        return _search(pattern, html)

    extract.__name__ = f"extract_{css_class.replace('-', '_')}"
    return extract


def extract_cookie(
    html: str, patterns: Sequence[re.Pattern[str]] = COOKIE_PATTERNS
) -> str | None:
    """Return the session cookie value from the first pattern that matches."""
    for pattern in patterns:
        value = _search(pattern, html)
        if value is not None:
            return value
    return None


def extract_name(html: str) -> str | None:
    """Prefer the "send to phone" heading, fall back to the subtitle summary."""
    name = _search(_NAME_RE, html)
    if name is None:
        name = _search(_SUMMARY_RE, html)
    if name is not None:
        name = name.replace("&amp;", "&")
    return name


def extract_phone_number(html: str) -> str | None:
    return _search(_PHONE_NUMBER_RE, html)


extract_address_primary = _address_extractor("address-primary")
extract_address_secondary = _address_extractor("address-secondary")
extract_address_location = _address_extractor("address-location")


@dataclass(frozen=True)
class PageExtractors:
    name: FieldExtractor = extract_name
    phone_number: FieldExtractor = extract_phone_number
    address_primary: FieldExtractor = extract_address_primary
    address_secondary: FieldExtractor = extract_address_secondary
    address_location: FieldExtractor = extract_address_location


def join_address(*parts: str | None) -> str | None:
    """Join non-empty parts with ", "; None when nothing is left."""
    address = ", ".join(p for p in parts if p)
    return address or None
