"""
Convert Keap REST JSON into Contact / ContactPage snapshots.

Raises ValueError on anything that does not look like the documented shape;
the client turns that into KeapError.
"""
from __future__ import annotations

from typing import Any

from app.contactviewer.modules.contacts.models import (
    Address,
    Contact,
    ContactPage,
    CustomField,
    EmailAddress,
    PhoneNumber,
)


def _opt_str(v: Any) -> str | None:
    if v is None:
        return None
    return str(v)


def _to_int(v: Any, what: str) -> int:
    if isinstance(v, bool):
        raise ValueError(f"{what} must be an integer")
    try:
        if isinstance(v, float) and not v.is_integer():
            raise ValueError(f"{what} must be an integer (got {v!r})")
        return int(v)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{what} must be an integer (got {v!r})")


def _entries(raw: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = raw.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise ValueError(f"{key} must be a list")
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"{key} entries must be objects")
    return items


def parse_contact(raw: Any) -> Contact:
    if not isinstance(raw, dict):
        raise ValueError("contact must be a JSON object")
    if raw.get("id") is None:
        raise ValueError("contact is missing id")

    return Contact(
        id=_to_int(raw["id"], "contact id"),
        given_name=_opt_str(raw.get("given_name")),
        family_name=_opt_str(raw.get("family_name")),
        email_addresses=tuple(
            EmailAddress(email=str(e.get("email") or ""), field=str(e.get("field") or ""))
            for e in _entries(raw, "email_addresses")
        ),
        phone_numbers=tuple(
            PhoneNumber(number=str(p.get("number") or ""), field=str(p.get("field") or ""))
            for p in _entries(raw, "phone_numbers")
        ),
        custom_fields=tuple(
            CustomField(id=_to_int(f.get("id"), "custom field id"), content=str(f.get("content") or ""))
            for f in _entries(raw, "custom_fields")
        ),
        addresses=tuple(
            Address(
                line1=_opt_str(a.get("line1")),
                line2=_opt_str(a.get("line2")),
                locality=_opt_str(a.get("locality")),
                region=_opt_str(a.get("region")),
                zip_code=_opt_str(a.get("zip_code")),
                country_code=_opt_str(a.get("country_code")),
            )
            for a in _entries(raw, "addresses")
        ),
    )


def parse_contact_page(raw: Any) -> ContactPage:
    if not isinstance(raw, dict):
        raise ValueError("contact list must be a JSON object")
    contacts = [parse_contact(c) for c in _entries(raw, "contacts")]
    count = raw.get("count")
    return ContactPage(
        contacts=contacts,
        count=len(contacts) if count is None else _to_int(count, "count"),
        next=_opt_str(raw.get("next")) or None,
    )
