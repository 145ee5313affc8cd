"""
PATH: users/views/auth.py

SESSION AUTH + PASSWORD RESET VIEWS

- Credentials are checked by Django's auth backend (users.auth_backends.EmailBackend).
- User-facing outcomes (bad login, unknown email, invalid/expired token,
  password mismatch) are flash messages + redirects, never exceptions.
- Database / mail failures are not caught here.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login, logout
from django.contrib.auth.views import LoginView as DjangoLoginView
from django.shortcuts import redirect, render, resolve_url
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.http import require_http_methods

from users.decorators import confirmed_passwords
from users.forms import ForgotPasswordForm, LoginForm
from users.services.password_reset import (
    build_reset_url,
    complete_password_reset,
    find_user_by_email,
    find_user_by_reset_token,
    issue_reset_token,
    send_reset_email,
)

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MESSAGE = "You are now logged in"
LOGIN_FAILURE_MESSAGE = "Failed login"
LOGOUT_MESSAGE = "You have been logged out successfully"
NO_ACCOUNT_MESSAGE = "No account with that email exists"
RESET_SENT_MESSAGE = "A password reset link has been email to you."
INVALID_TOKEN_MESSAGE = "Reset password token is invalid or has expired"
RESET_DONE_MESSAGE = "Your password has been reset. You are now logged in!"


# ---------------- LOGIN ----------------
class LoginView(DjangoLoginView):
    template_name = "users/login.html"
    authentication_form = LoginForm
    extra_context = {"title": "Login"}

    def get_success_url(self):
        return resolve_url(settings.LOGIN_REDIRECT_URL)

    def form_valid(self, form):
        response = super().form_valid(form)
        messages.success(self.request, LOGIN_SUCCESS_MESSAGE)
        return response

    def form_invalid(self, form):
        logger.info(
            "Login failed",
            extra={"email": (self.request.POST.get("username") or "").strip()},
        )
        messages.error(self.request, LOGIN_FAILURE_MESSAGE)
        return redirect("users:login")


# ---------------- LOGOUT ----------------
@require_http_methods(["GET", "POST"])
def logout_view(request):
    logout(request)
    messages.success(request, LOGOUT_MESSAGE)
    return redirect("/")


# ---------------- FORGOT PASSWORD ----------------
@require_http_methods(["GET", "POST"])
def forgot(request):
    if request.method == "GET":
        return render(
            request,
            "users/forgot.html",
            {"title": "Forgot your password?", "form": ForgotPasswordForm()},
        )

    user = find_user_by_email(request.POST.get("email", ""))
    if user is None:
        messages.error(request, NO_ACCOUNT_MESSAGE)
        return redirect("users:login")

    token = issue_reset_token(user)
    send_reset_email(user, build_reset_url(request, token))

    messages.success(request, RESET_SENT_MESSAGE)
    return redirect("users:login")


# ---------------- RESET (form) + UPDATE (submit) ----------------
class ResetPasswordView(View):
    """
    GET  /account/reset/<token>/  -> reset form
    POST /account/reset/<token>/  -> set the new password and log in
    """

    template_name = "users/reset.html"

    def get(self, request, token):
        user = find_user_by_reset_token(token)
        if user is None:
            messages.error(request, INVALID_TOKEN_MESSAGE)
            return redirect("users:login")

        return render(request, self.template_name, {"title": "Reset your password"})

    @method_decorator(confirmed_passwords)
    def post(self, request, token):
        user = find_user_by_reset_token(token)
        if user is None:
            messages.error(request, INVALID_TOKEN_MESSAGE)
            return redirect("users:login")

        updated_user = complete_password_reset(user, request.POST["password"])
        login(request, updated_user)

        messages.success(request, RESET_DONE_MESSAGE)
        return redirect("/")
