from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EmailAddress:
    email: str
    field: str = ""


@dataclass(frozen=True)
class PhoneNumber:
    number: str
    field: str = ""


@dataclass(frozen=True)
class CustomField:
    id: int
    content: str = ""


@dataclass(frozen=True)
class Address:
    line1: str | None = None
    line2: str | None = None
    locality: str | None = None
    region: str | None = None
    zip_code: str | None = None
    country_code: str | None = None


@dataclass(frozen=True)
class Contact:
    """Snapshot of a Keap contact. Only `id` is guaranteed by the API."""

    id: int
    given_name: str | None = None
    family_name: str | None = None
    email_addresses: tuple[EmailAddress, ...] = ()
    phone_numbers: tuple[PhoneNumber, ...] = ()
    custom_fields: tuple[CustomField, ...] = ()
    addresses: tuple[Address, ...] = ()

    @property
    def first_email(self) -> str | None:
        return self.email_addresses[0].email if self.email_addresses else None

    @property
    def first_phone(self) -> str | None:
        return self.phone_numbers[0].number if self.phone_numbers else None


@dataclass(frozen=True)
class ContactPage:
    contacts: list[Contact] = field(default_factory=list)
    count: int = 0
    next: str | None = None
