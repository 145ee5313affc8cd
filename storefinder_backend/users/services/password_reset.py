# users/services/password_reset.py

"""
PASSWORD RESET SERVICE

Lifecycle of a reset token stored on the user row:

    NoToken -> TokenIssued(expiry) -> Consumed | Expired | Invalidated

- issue_reset_token(): 20 random bytes, hex encoded, valid for
  settings.PASSWORD_RESET_TIMEOUT_SECONDS (one hour). Issuing again overwrites
  (invalidates) any previous token.
- find_user_by_reset_token(): the single lookup used by both the reset form and
  the password update. Token match AND unexpired expiry are checked in one query,
  so a wrong token and an expired token are indistinguishable to the caller.
- complete_password_reset(): hashes the new password and clears both token fields.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.urls import reverse
from django.utils import timezone

from users import mail

logger = logging.getLogger(__name__)

User = get_user_model()

RESET_TOKEN_BYTES = 20


def reset_token_lifetime() -> timedelta:
    return timedelta(seconds=settings.PASSWORD_RESET_TIMEOUT_SECONDS)


def find_user_by_email(email: str) -> Optional[User]:
    email = (email or "").strip()
    if not email:
        return None
    return User.objects.filter(email__iexact=email).first()


def issue_reset_token(user: User, *, now: Optional[datetime] = None) -> str:
    now = now or timezone.now()

    user.reset_password_token = secrets.token_hex(RESET_TOKEN_BYTES)
    user.reset_password_expires = now + reset_token_lifetime()
    user.save(update_fields=["reset_password_token", "reset_password_expires", "updated_at"])

    logger.info(
        "Password reset token issued",
        extra={"user_id": user.pk, "expires": user.reset_password_expires.isoformat()},
    )
    return user.reset_password_token


def build_reset_url(request, token: str) -> str:
    return request.build_absolute_uri(reverse("users:reset", args=[token]))


def send_reset_email(user: User, reset_url: str) -> None:
    mail.send(
        user=user,
        subject="Password Reset",
        filename="password-reset",
        reset_url=reset_url,
    )


def find_user_by_reset_token(token: str, *, now: Optional[datetime] = None) -> Optional[User]:
    token = (token or "").strip()
    if not token:
        return None

    now = now or timezone.now()
    return User.objects.filter(
        reset_password_token=token,
        reset_password_expires__gt=now,
    ).first()


@transaction.atomic
def complete_password_reset(user: User, password: str) -> User:
    user.set_password(password)
    user.reset_password_token = None
    user.reset_password_expires = None
    user.save()

    logger.info("Password reset completed", extra={"user_id": user.pk})
    return user
