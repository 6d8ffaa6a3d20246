"""Credential check for dashboard logins."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
import logging

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Resolve a login to a user and stamp last_login.

    Unknown emails and wrong passwords fail with the same message so the
    response does not reveal which accounts exist. The password is checked
    before the active flag, so a deactivated account is only reported to
    someone who knows its password.

    Raises:
        InvalidCredentialsError: Unknown email or wrong password
        InactiveAccountError: Correct credentials for a deactivated account
    """
    user = (
        User.objects
        .select_for_update()
        .filter(email__iexact=User.objects.normalize_email(email).strip())
        .first()
    )

    if user is None or not user.check_password(password):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    if not user.is_active:
        logger.warning("Login attempt for deactivated account %s", user.id)
        raise InactiveAccountError("Account is deactivated")

    User.objects.filter(pk=user.pk).update(last_login=timezone.now())
    user.refresh_from_db(fields=['last_login'])
    return user
