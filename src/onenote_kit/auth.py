"""Microsoft Graph sign-in for the OneNote reader.

Device code flow with a persistent token cache, plus a saved
AuthenticationRecord so later runs can authenticate silently.
"""

from __future__ import annotations

import logging
import sys

from azure.identity import AuthenticationRecord, DeviceCodeCredential, TokenCachePersistenceOptions
from msgraph import GraphServiceClient

from . import config

logger = logging.getLogger(__name__)

_CACHE_NAME = "onenote-kit"
_RECORD_FILE = "auth_record.json"


def _record_path():
    return config.AUTH_DIR / _RECORD_FILE


def load_auth_record() -> AuthenticationRecord | None:
    """Return the saved AuthenticationRecord, or None if missing or unreadable."""
    path = _record_path()
    if not path.exists():
        return None
    try:
        return AuthenticationRecord.deserialize(path.read_text())
    except (OSError, ValueError, KeyError) as exc:
        logger.warning("Ignoring unreadable auth record %s: %s", path, exc)
        return None


def save_auth_record(record: AuthenticationRecord) -> None:
    config.AUTH_DIR.mkdir(parents=True, exist_ok=True)
    _record_path().write_text(record.serialize())
    logger.debug("Saved auth record for %s", record.username)


def _prompt(verification_uri: str, user_code: str, expires_on) -> None:
    print(
        f"\nTo sign in, open: {verification_uri}\n"
        f"Enter the code: {user_code}\n",
        file=sys.stderr,
    )


def make_credential(
    *,
    disable_automatic_authentication: bool = False,
    with_record: bool = True,
) -> DeviceCodeCredential:
    """Build a DeviceCodeCredential backed by the persistent token cache."""
    kwargs: dict = {
        "client_id": config.CLIENT_ID,
        "tenant_id": config.TENANT_ID,
        "cache_persistence_options": TokenCachePersistenceOptions(name=_CACHE_NAME),
        "disable_automatic_authentication": disable_automatic_authentication,
        "prompt_callback": _prompt,
    }
    if with_record:
        record = load_auth_record()
        if record:
            kwargs["authentication_record"] = record

    return DeviceCodeCredential(**kwargs)


def authenticate() -> AuthenticationRecord:
    """Run the device code flow interactively and persist the result."""
    config.validate()
    credential = make_credential(with_record=False)
    record = credential.authenticate(scopes=config.SCOPES)
    save_auth_record(record)
    return record


def check_auth_status() -> dict:
    """Report whether a token can be obtained without user interaction."""
    record = load_auth_record()
    if not record:
        return {"authenticated": False, "reason": "No saved authentication record. Run auth_login.py first."}

    try:
        make_credential(disable_automatic_authentication=True).get_token(*config.SCOPES)
    except Exception as exc:
        # Any credential failure means "not signed in" for a status probe.
        logger.debug("Silent token acquisition failed: %s", exc)
        return {
            "authenticated": False,
            "reason": f"Token expired or invalid: {exc}. Run auth_login.py to re-authenticate.",
            "username": record.username,
        }
    return {
        "authenticated": True,
        "username": record.username,
        "tenant_id": record.tenant_id,
        "authority": record.authority,
    }


def get_graph_client() -> GraphServiceClient:
    """Get a GraphServiceClient; falls back to the device code flow if needed."""
    config.validate()
    return GraphServiceClient(credentials=make_credential(), scopes=config.SCOPES)


def logout() -> None:
    """Forget the saved authentication record."""
    path = _record_path()
    if path.exists():
        path.unlink()
        logger.info("Removed %s", path)
