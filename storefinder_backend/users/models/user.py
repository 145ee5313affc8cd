"""
PATH: users/models/user.py

CUSTOM USER MODEL

- Email is the login identifier (USERNAME_FIELD).
- Carries the password-reset token + expiry used by the "forgot password" flow.
  A token is only honoured while its expiry is in the future.
"""

from __future__ import annotations

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models
from django.utils import timezone


# ---------------- USER MANAGER ----------------
class UserManager(BaseUserManager):
    def create_user(self, email=None, password=None, **extra_fields):
        """
        Create a user identified by email.

        - email is required and normalized (domain part lowercased)
        - name defaults to the email local-part when omitted
        """
        email = (email or "").strip()
        if not email:
            raise ValueError("An email address is required")

        email = self.normalize_email(email)
        extra_fields.setdefault("is_active", True)

        name = (extra_fields.pop("name", "") or "").strip()
        if not name:
            name = email.split("@")[0]

        user = self.model(email=email, name=name, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError("Superuser must have an email")
        if not password:
            raise ValueError("Superuser must have a password")

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True")

        return self.create_user(email=email, password=password, **extra_fields)


# ---------------- USER MODEL ----------------
class User(AbstractBaseUser, PermissionsMixin):
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=150)

    reset_password_token = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        db_index=True,
    )
    reset_password_expires = models.DateTimeField(null=True, blank=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        ordering = ["-created_at"]

    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_email(self.email or "").strip()
        self.name = (self.name or "").strip()

    @property
    def has_valid_reset_token(self) -> bool:
        return bool(
            self.reset_password_token
            and self.reset_password_expires
            and self.reset_password_expires > timezone.now()
        )

    def __str__(self):
        return f"{self.name} <{self.email}>"
