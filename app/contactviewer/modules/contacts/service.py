"""
Contact viewer state.

One ContactViewer holds what the browser page shows: the loaded contacts, the
current search query, the selected contact and the view mode. The Keap client
is passed in so tests can substitute a stub.
"""
from __future__ import annotations

import logging
from typing import Protocol

from app.contactviewer.modules.contacts.keap_client import KeapError
from app.contactviewer.modules.contacts.models import Contact, ContactPage
from app.contactviewer.modules.contacts.utils import filter_contacts

logger = logging.getLogger(__name__)

VIEW_LIST = "list"
VIEW_DETAIL = "detail"

LOAD_FAILED_MESSAGE = "Failed to load contacts. Please check your API credentials."
DETAIL_FAILED_MESSAGE = "Failed to load contact details."


class ContactSource(Protocol):
    def list_contacts(self, limit: int = 50, offset: int = 0) -> ContactPage: ...

    def get_contact(self, contact_id: int) -> Contact: ...

    def search_contacts(self, email: str, limit: int = 50) -> ContactPage: ...


class ContactViewer:
    def __init__(self, client: ContactSource, *, list_limit: int = 100) -> None:
        self.client = client
        self.list_limit = list_limit
        self.contacts: list[Contact] = []
        self.query = ""
        self.selected: Contact | None = None
        self.view = VIEW_LIST
        self.error: str | None = None

    @property
    def filtered(self) -> list[Contact]:
        return filter_contacts(self.contacts, self.query)

    def set_query(self, query: str | None) -> list[Contact]:
        self.query = query or ""
        return self.filtered

    def load(self, limit: int | None = None) -> bool:
        """Replace the contact list with the first page from Keap."""
        self.error = None
        try:
            page = self.client.list_contacts(limit=limit or self.list_limit)
        except KeapError:
            logger.exception("Error loading contacts")
            self.error = LOAD_FAILED_MESSAGE
            self.contacts = []
            return False
        self.contacts = list(page.contacts)
        return True

    def select(self, contact_id: int) -> Contact | None:
        """Fetch the full record and switch to the detail view."""
        try:
            contact = self.client.get_contact(contact_id)
        except KeapError:
            logger.exception("Error loading contact details (id=%s)", contact_id)
            self.error = DETAIL_FAILED_MESSAGE
            return None
        self.selected = contact
        self.view = VIEW_DETAIL
        return contact

    def back(self) -> None:
        self.view = VIEW_LIST
        self.selected = None
