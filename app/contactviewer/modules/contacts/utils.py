from __future__ import annotations

import re
from typing import Iterable

from app.contactviewer.modules.contacts.models import Address, Contact

POOL_SALT = "Salt"
POOL_CHLORINE = "Chlorine"
POOL_UNKNOWN = "Unknown"

_NON_DIGIT_RX = re.compile(r"\D")


def full_name(contact: Contact) -> str:
    """Given and family name joined by a space; missing parts are empty."""
    return f"{contact.given_name or ''} {contact.family_name or ''}"


def display_name(contact: Contact) -> str:
    return full_name(contact).strip() or "Unnamed Contact"


def contact_matches(contact: Contact, query: str) -> bool:
    """
    Case-insensitive substring match against name, first email and first phone.

    The phone is matched literally: "555-1234" does not match "5551234".
    """
    q = query.lower()
    name = full_name(contact).lower()
    email = (contact.first_email or "").lower()
    phone = (contact.first_phone or "").lower()
    return q in name or q in email or q in phone


def filter_contacts(contacts: Iterable[Contact], query: str | None) -> list[Contact]:
    """
    Contacts matching `query`, in their original order.

    A blank or whitespace-only query keeps everything. A non-blank query is
    used as typed (not stripped), so "john " only matches names with a
    trailing family name.
    """
    items = list(contacts)
    if not query or not query.strip():
        return items
    return [c for c in items if contact_matches(c, query)]


def pool_type(contact: Contact) -> str:
    """
    Infer pool equipment from free-text custom fields.

    Takes the first field mentioning "salt" or "chlorine" (case-insensitive).
    A field mentioning both is Salt, since salt is checked first.
    """
    for f in contact.custom_fields:
        content = (f.content or "").lower()
        if "salt" in content or "chlorine" in content:
            if "salt" in content:
                return POOL_SALT
            return POOL_CHLORINE
    return POOL_UNKNOWN


def format_phone(phone: str) -> str:
    """
    Render a 10-digit number as "(AAA) BBB-CCCC".

    Anything that is not exactly 10 digits once non-digits are stripped is
    returned unchanged.

    Examples:
        >>> format_phone("5551234567")
        '(555) 123-4567'
        >>> format_phone("555.123.4567")
        '(555) 123-4567'
        >>> format_phone("555-123")
        '555-123'
    """
    cleaned = _NON_DIGIT_RX.sub("", phone or "")
    if len(cleaned) == 10:
        return f"({cleaned[:3]}) {cleaned[3:6]}-{cleaned[6:]}"
    return phone


def format_address_lines(address: Address) -> list[str]:
    """Lines for display: line1, line2, "locality, region zip", country."""
    lines: list[str] = []
    if address.line1:
        lines.append(address.line1)
    if address.line2:
        lines.append(address.line2)

    city_line = address.locality or ""
    if address.region:
        city_line = f"{city_line}, {address.region}" if city_line else address.region
    if address.zip_code:
        city_line = f"{city_line} {address.zip_code}" if city_line else address.zip_code
    if city_line:
        lines.append(city_line)

    if address.country_code:
        lines.append(address.country_code)
    return lines
