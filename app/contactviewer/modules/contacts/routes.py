from __future__ import annotations

from flask import Blueprint, current_app, render_template, request, url_for

from app.contactviewer.modules.contacts.keap_client import KeapError
from app.contactviewer.modules.contacts.service import ContactViewer
from app.contactviewer.modules.contacts.utils import display_name, format_phone, pool_type

bp = Blueprint("contacts", __name__)


def _viewer() -> ContactViewer:
    client = current_app.extensions["keap_client"]
    return ContactViewer(client, list_limit=int(current_app.config.get("CONTACT_LIST_LIMIT") or 100))


def _query() -> str:
    return request.args.get("q") or ""


@bp.get("/")
def contacts_list():
    viewer = _viewer()
    q = _query()
    if not viewer.load():
        retry_url = url_for("contacts.contacts_list", q=q or None)
        return render_template("contacts/error.html", viewer=viewer, retry_url=retry_url), 502
    viewer.set_query(q)
    return render_template("contacts/list.html", viewer=viewer, contacts=viewer.filtered, q=q)


@bp.get("/contacts/<int:contact_id>")
def contact_detail(contact_id: int):
    viewer = _viewer()
    q = _query()
    contact = viewer.select(contact_id)
    if contact is None:
        retry_url = url_for("contacts.contact_detail", contact_id=contact_id, q=q or None)
        return render_template("contacts/error.html", viewer=viewer, retry_url=retry_url), 502
    back_url = url_for("contacts.contacts_list", q=q or None)
    return render_template("contacts/detail.html", viewer=viewer, contact=contact, back_url=back_url)


@bp.get("/contacts/lookup")
def contact_lookup():
    """JSON search by email (server-side, unlike the list filter)."""
    email = (request.args.get("email") or "").strip()
    if not email:
        return {"error": "email is required"}, 400

    client = current_app.extensions["keap_client"]
    try:
        page = client.search_contacts(email)
    except KeapError:
        current_app.logger.exception("Contact lookup failed (email=%s)", email)
        return {"error": "Failed to search contacts."}, 502

    return {
        "count": page.count,
        "contacts": [
            {
                "id": c.id,
                "name": display_name(c),
                "email": c.first_email,
                "phone": format_phone(c.first_phone) if c.first_phone else None,
                "pool_type": pool_type(c),
            }
            for c in page.contacts
        ],
    }
