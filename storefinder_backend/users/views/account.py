"""
PATH: users/views/account.py

REGISTRATION + ACCOUNT VIEWS

- Register validates the form, creates the user and logs them straight in.
- Account editing is limited to name + email of the logged-in user.
"""

from __future__ import annotations

import logging

from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.views.decorators.http import require_http_methods

from users.decorators import login_required_with_flash, redirect_back
from users.forms import AccountForm, RegisterForm

logger = logging.getLogger(__name__)


def _flash_form_errors(request, form) -> None:
    for errors in form.errors.values():
        for error in errors:
            messages.error(request, error)


# ---------------- REGISTER ----------------
@require_http_methods(["GET", "POST"])
def register(request):
    if request.method == "GET":
        return render(request, "users/register.html", {"title": "Register", "form": RegisterForm()})

    form = RegisterForm(request.POST)
    if not form.is_valid():
        _flash_form_errors(request, form)
        return render(
            request,
            "users/register.html",
            {"title": "Register", "form": form},
            status=400,
        )

    user = form.save()
    login(request, user)
    logger.info("User registered", extra={"user_id": user.pk})

    messages.success(request, "Welcome aboard! You are now logged in")
    return redirect("/")


# ---------------- ACCOUNT ----------------
@login_required_with_flash
@require_http_methods(["GET", "POST"])
def account(request):
    if request.method == "GET":
        return render(
            request,
            "users/account.html",
            {"title": "Edit Your Account", "form": AccountForm(instance=request.user)},
        )

    form = AccountForm(request.POST, instance=request.user)
    if not form.is_valid():
        _flash_form_errors(request, form)
        return redirect_back(request)

    form.save()
    messages.success(request, "Updated the profile!")
    return redirect_back(request)
