from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any, Mapping

from app.contactviewer.modules.contacts.models import Contact, ContactPage
from app.contactviewer.modules.contacts.parsers import parse_contact, parse_contact_page

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.infusionsoft.com/crm/rest"


class KeapError(RuntimeError):
    """Any failed Keap call: transport, non-2xx status or unparseable body."""


@dataclass(frozen=True)
class KeapClient:
    api_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: int = 30

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def request_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        if not self.api_token:
            raise KeapError("KEAP_API_TOKEN is not configured.")

        url = self.base_url.rstrip("/") + path
        if params:
            url += "?" + urllib.parse.urlencode({k: v for k, v in params.items() if v is not None})

        req = urllib.request.Request(url, method="GET", headers=self._headers())
        try:
            with urllib.request.urlopen(req, timeout=self.timeout_seconds) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            try:
                body = e.read().decode("utf-8", errors="ignore")
            except Exception:
                body = ""
            raise KeapError(f"HTTP {e.code} from Keap ({path}): {body[:300]}") from e
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise KeapError(f"Keap request failed ({path}): {e}") from e

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as e:
            raise KeapError(f"Invalid JSON from Keap ({path})") from e

    def _call(self, op: str, path: str, params: dict[str, Any] | None, parse) -> Any:
        try:
            return parse(self.request_json(path, params=params))
        except KeapError as e:
            logger.error("KEAP: %s failed: %s", op, e)
            raise
        except ValueError as e:
            logger.error("KEAP: %s returned malformed body: %s", op, e)
            raise KeapError(f"Malformed response from Keap ({path}): {e}") from e

    def list_contacts(self, limit: int = 50, offset: int = 0) -> ContactPage:
        return self._call(
            "list_contacts",
            "/v1/contacts",
            {"limit": limit, "offset": offset},
            parse_contact_page,
        )

    def get_contact(self, contact_id: int) -> Contact:
        return self._call(
            "get_contact",
            f"/v1/contacts/{urllib.parse.quote(str(contact_id))}",
            None,
            parse_contact,
        )

    def search_contacts(self, email: str, limit: int = 50) -> ContactPage:
        return self._call(
            "search_contacts",
            "/v1/contacts",
            {"email": email, "limit": limit},
            parse_contact_page,
        )


def client_from_config(config: Mapping[str, Any]) -> KeapClient:
    return KeapClient(
        api_token=str(config.get("KEAP_API_TOKEN") or ""),
        base_url=str(config.get("KEAP_BASE_URL") or DEFAULT_BASE_URL),
        timeout_seconds=int(config.get("KEAP_TIMEOUT_SECONDS") or 30),
    )
