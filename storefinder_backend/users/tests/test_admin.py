# users/tests/test_admin.py

from datetime import timedelta

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from users.admin import UserAdmin
from users.services.password_reset import issue_reset_token

User = get_user_model()


class UserAdminResetColumnTests(TestCase):
    """
    GUARANTEES:
    - "Reset pending" is true only while an issued token is unexpired
    """

    def setUp(self):
        self.model_admin = UserAdmin(User, admin.site)
        self.user = User.objects.create_user(email="wes@example.com", password="pw", name="Wes")

    def test_no_token(self):
        self.assertFalse(self.model_admin.reset_pending(self.user))

    def test_live_token(self):
        issue_reset_token(self.user)

        self.assertTrue(self.model_admin.reset_pending(self.user))

    def test_expired_token(self):
        issue_reset_token(self.user, now=timezone.now() - timedelta(hours=2))

        self.assertFalse(self.model_admin.reset_pending(self.user))

    def test_changelist_shows_column(self):
        staff = User.objects.create_superuser(email="admin@example.com", password="pw", name="Admin")
        self.client.force_login(staff)

        response = self.client.get(reverse("admin:users_user_changelist"))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Reset pending")
