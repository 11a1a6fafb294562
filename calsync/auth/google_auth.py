# File: calsync/auth/google_auth.py
"""
OAuth credentials for read-only Google Calendar access.

The token lives in Config.TOKEN_FILE. It is created once through the
browser flow (`import_events.py --auth`), then loaded and refreshed on
every run that reads from Google.
"""

from typing import Optional
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError

from calsync.core.config_manager import Config
from calsync.utils.logger import setup_logger

logger = setup_logger(__name__)


def _save_token(creds: Credentials) -> None:
    Config.TOKEN_FILE.write_text(creds.to_json(), encoding='utf-8')
    logger.debug(f"Calendar token written to {Config.TOKEN_FILE}")


def _load_token() -> Optional[Credentials]:
    if not Config.TOKEN_FILE.exists():
        logger.warning(f"No calendar token at {Config.TOKEN_FILE}")
        return None
    return Credentials.from_authorized_user_file(str(Config.TOKEN_FILE), Config.GOOGLE_SCOPES)


def _authenticate() -> Optional[Credentials]:
    """
    Stored calendar credentials, refreshed if they have expired.

    A token that can no longer be refreshed is removed so the next
    run asks for a fresh sign-in.
    """
    creds = _load_token()
    if creds is None or creds.valid:
        return creds

    if not (creds.expired and creds.refresh_token):
        logger.warning("Calendar token is invalid and cannot be refreshed")
        return None

    logger.info("Calendar token expired; refreshing")
    try:
        creds.refresh(Request())
    except Exception as e:
        logger.error(f"Could not refresh calendar token: {e}", exc_info=True)
        Config.TOKEN_FILE.unlink(missing_ok=True)
        return None

    _save_token(creds)
    return creds


def create_initial_token() -> bool:
    """
    Sign in through the browser and store the calendar token.

    Returns:
        True if a token was stored, False otherwise
    """
    if not Config.CREDENTIALS_FILE.exists():
        logger.error(
            f"OAuth client file not found at {Config.CREDENTIALS_FILE}; "
            "download it from the Google Cloud Console"
        )
        return False

    logger.info("Opening browser for Google sign-in (calendar, read-only)")
    try:
        flow = InstalledAppFlow.from_client_secrets_file(
            str(Config.CREDENTIALS_FILE), Config.GOOGLE_SCOPES
        )
        _save_token(flow.run_local_server(port=0))
    except Exception as e:
        logger.error(f"Google sign-in failed: {e}", exc_info=True)
        return False

    logger.info(f"Signed in; calendar token saved to {Config.TOKEN_FILE}")
    return True


def get_calendar_service() -> Optional[Resource]:
    """
    Calendar v3 resource for the stored token.

    Returns:
        Calendar API resource, or None if there are no usable credentials
    """
    creds = _authenticate()
    if creds is None:
        logger.error("No usable calendar token; run with --auth first")
        return None

    try:
        return build("calendar", "v3", credentials=creds)
    except HttpError as err:
        logger.error(f"Could not build calendar service: {err}", exc_info=True)
        return None
