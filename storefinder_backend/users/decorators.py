# users/decorators.py

"""
VIEW GUARDS

- login_required_with_flash: authenticated sessions pass through; anonymous
  requests get an error flash and a redirect to the login page.
- confirmed_passwords: POSTed "password" and "password-confirm" must be
  exactly equal, otherwise an error flash and a redirect back.
"""

from __future__ import annotations

from functools import wraps

from django.contrib import messages
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme

LOGIN_REQUIRED_MESSAGE = "Oops, You must be logged in to view this page!"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match!"


def redirect_back(request, fallback=None):
    """Redirect to the referring page, else `fallback`, else the current path."""
    referer = request.META.get("HTTP_REFERER", "")
    if referer and url_has_allowed_host_and_scheme(
        referer,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return redirect(referer)
    return redirect(fallback or request.path)


def login_required_with_flash(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if request.user.is_authenticated:
            return view_func(request, *args, **kwargs)
        messages.error(request, LOGIN_REQUIRED_MESSAGE)
        return redirect("users:login")

    return _wrapped


def passwords_match(data) -> bool:
    password = data.get("password")
    confirm = data.get("password-confirm")
    return password is not None and password == confirm


def confirmed_passwords(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if passwords_match(request.POST):
            return view_func(request, *args, **kwargs)
        messages.error(request, PASSWORD_MISMATCH_MESSAGE)
        return redirect_back(request)

    return _wrapped
