"""
PATH: users/auth_backends.py

AUTH BACKEND: Email login

Rules:
- The identifier is the account email, matched case-insensitively.
- Django convention passes it as "username"; forms may pass email=... instead.
- Inactive users never authenticate.

This is used by django.contrib.auth.authenticate() (login form, admin).
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend

User = get_user_model()


class EmailBackend(ModelBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        identifier = (username or kwargs.get("email") or "").strip()
        if not identifier or password is None:
            return None

        try:
            user = User.objects.get(email__iexact=identifier)
        except User.DoesNotExist:
            # Same hashing cost as a wrong password
            User().set_password(password)
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user

        return None
