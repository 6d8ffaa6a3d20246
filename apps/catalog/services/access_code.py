"""
Daily access code gating the medicine database.

The code is derived from SECRET_KEY and the local date, so every worker
and every restart agrees on it for the whole day without shared state.
Unlocking is remembered in the user's session only.
"""

from datetime import date
from typing import Optional
import hashlib
import hmac
import logging
import secrets

from django.conf import settings
from django.utils import timezone

from .exceptions import InvalidAccessCodeError

logger = logging.getLogger(__name__)

CODE_SALT = 'catalog.daily-access-code'
CODE_MIN = 10000000
CODE_SPAN = 90000000
SESSION_UNLOCK_KEY = 'catalog_unlocked'


def get_daily_code(today: Optional[date] = None) -> str:
    """
    Return the 8-digit access code for a local calendar day.

    Args:
        today: Day to derive the code for; defaults to the local date

    Returns:
        Code in the range 10000000-99999999
    """
    if today is None:
        today = timezone.localdate()

    digest = hmac.new(
        f'{CODE_SALT}:{settings.SECRET_KEY}'.encode(),
        today.isoformat().encode(),
        hashlib.sha256,
    ).digest()
    return str(CODE_MIN + int.from_bytes(digest[:8], 'big') % CODE_SPAN)


def verify_code(code: str, today: Optional[date] = None) -> bool:
    """Check a submitted code against today's code."""
    return secrets.compare_digest(str(code), get_daily_code(today))


def unlock_session(session, code: str, today: Optional[date] = None) -> None:
    """
    Unlock the database for this session.

    Raises:
        InvalidAccessCodeError: If the code does not match today's code
    """
    if not verify_code(code, today):
        logger.warning("Invalid database access code attempt")
        raise InvalidAccessCodeError("Invalid code")

    session[SESSION_UNLOCK_KEY] = True


def is_unlocked(session) -> bool:
    return bool(session.get(SESSION_UNLOCK_KEY, False))
