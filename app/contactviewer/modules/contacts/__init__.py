"""
Contacts module.

Scope:
- List up to CONTACT_LIST_LIMIT contacts from Keap, filtered by a search box
- Detail view (re-fetched by id) with derived pool type
- JSON lookup by email
- Read-only: nothing is written back to the CRM
"""
