import logging

from flask import Flask, render_template
from dotenv import load_dotenv

from app.contactviewer.config import load_config
from app.contactviewer.routes import bp as routes_bp
from app.contactviewer.modules.contacts.keap_client import client_from_config
from app.contactviewer.modules.contacts.routes import bp as contacts_bp
from app.contactviewer.modules.contacts.utils import (
    display_name,
    format_address_lines,
    format_phone,
    pool_type,
)


def create_app(client=None) -> Flask:
    """
    Build the viewer app.

    `client` replaces the Keap client built from config (tests pass a stub).
    """
    load_dotenv()
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_mapping(load_config())

    @app.template_filter("phone")
    def _phone_filter(value) -> str:
        if not value:
            return "No phone"
        return format_phone(str(value))

    app.add_template_filter(display_name, "display_name")
    app.add_template_filter(pool_type, "pool_type")
    app.add_template_filter(format_address_lines, "address_lines")

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")
        if client is None and not app.config.get("KEAP_API_TOKEN"):
            raise RuntimeError("KEAP_API_TOKEN is required in production.")
    elif client is None and not app.config.get("KEAP_API_TOKEN"):
        app.logger.warning("KEAP_API_TOKEN is not set; contact pages will show a load error.")

    app.extensions["keap_client"] = client if client is not None else client_from_config(app.config)

    app.register_blueprint(routes_bp)
    app.register_blueprint(contacts_bp)

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500")
        return render_template("errors/500.html"), 500

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
