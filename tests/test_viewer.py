"""Tests for ContactViewer state transitions with a stub Keap client."""
import pytest

from app.contactviewer.modules.contacts.keap_client import KeapError
from app.contactviewer.modules.contacts.models import Contact, ContactPage, CustomField, EmailAddress
from app.contactviewer.modules.contacts.service import (
    DETAIL_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
    VIEW_DETAIL,
    VIEW_LIST,
    ContactViewer,
)


class StubClient:
    def __init__(self, contacts):
        self.contacts = {c.id: c for c in contacts}
        self.fail_list = False
        self.fail_get = False
        self.calls = []

    def list_contacts(self, limit=50, offset=0):
        self.calls.append(("list_contacts", limit, offset))
        if self.fail_list:
            raise KeapError("HTTP 500 from Keap")
        items = list(self.contacts.values())[offset:offset + limit]
        return ContactPage(contacts=items, count=len(items))

    def get_contact(self, contact_id):
        self.calls.append(("get_contact", contact_id))
        if self.fail_get or contact_id not in self.contacts:
            raise KeapError("HTTP 404 from Keap")
        c = self.contacts[contact_id]
        # full record carries custom fields the summary may not
        return Contact(id=c.id, given_name=c.given_name, family_name=c.family_name,
                       email_addresses=c.email_addresses,
                       custom_fields=(CustomField(id=1, content="Salt cell"),))

    def search_contacts(self, email, limit=50):
        return ContactPage()


@pytest.fixture()
def stub():
    return StubClient([
        Contact(id=1, given_name="Jane", family_name="Doe",
                email_addresses=(EmailAddress(email="jane@example.com"),)),
        Contact(id=2, given_name="John", family_name="Smith"),
        Contact(id=3, given_name="Ann", family_name="Lee"),
    ])


def test_initial_state(stub):
    v = ContactViewer(stub)
    assert v.view == VIEW_LIST
    assert v.contacts == []
    assert v.selected is None
    assert v.error is None


def test_load_requests_up_to_100(stub):
    v = ContactViewer(stub)
    assert v.load() is True
    assert stub.calls == [("list_contacts", 100, 0)]
    assert [c.id for c in v.contacts] == [1, 2, 3]


def test_failed_load_then_retry(stub):
    v = ContactViewer(stub)
    stub.fail_list = True
    assert v.load() is False
    assert v.contacts == []
    assert v.error == LOAD_FAILED_MESSAGE

    stub.fail_list = False
    assert v.load() is True
    assert v.error is None
    assert len(v.contacts) == 3


def test_query_filters_and_blank_restores(stub):
    v = ContactViewer(stub)
    v.load()
    assert [c.id for c in v.set_query("J")] == [1, 2]
    assert [c.id for c in v.set_query("jane@")] == [1]
    assert v.set_query("  ") == v.contacts
    assert v.set_query(None) == v.contacts


def test_select_refetches_and_switches_to_detail(stub):
    v = ContactViewer(stub)
    v.load()
    contact = v.select(1)
    assert ("get_contact", 1) in stub.calls
    assert contact is v.selected
    assert v.selected.custom_fields[0].content == "Salt cell"
    assert v.view == VIEW_DETAIL


def test_failed_select_stays_on_list(stub):
    v = ContactViewer(stub)
    v.load()
    stub.fail_get = True
    assert v.select(2) is None
    assert v.view == VIEW_LIST
    assert v.selected is None
    assert v.error == DETAIL_FAILED_MESSAGE
    assert len(v.contacts) == 3


def test_back_keeps_loaded_list(stub):
    v = ContactViewer(stub)
    v.load()
    before = list(v.contacts)
    v.set_query("ann")
    v.select(3)
    v.back()
    assert v.view == VIEW_LIST
    assert v.selected is None
    assert v.contacts == before
    assert [c.id for c in v.filtered] == [3]
