# stores/tests/test_seed_command.py

from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command
from django.test import TestCase

from reviews.models import Review
from stores.models import Store

User = get_user_model()


class SeedStoresCommandTests(TestCase):
    def _seed(self, *args):
        out = StringIO()
        call_command("seed_stores", *args, stdout=out)
        return out.getvalue()

    def test_seeds_users_stores_and_reviews(self):
        output = self._seed()

        self.assertIn("Seed complete: users=3 stores=3 reviews=5", output)
        self.assertTrue(User.objects.get(email="wes@example.com").check_password("wes"))
        self.assertEqual(
            Store.objects.get(name="Green Leaf Cafe").tags,
            ["Vegetarian", "Wifi", "Family Friendly"],
        )

    def test_is_idempotent(self):
        self._seed()
        output = self._seed()

        self.assertIn("Seed complete: users=0 stores=0 reviews=0", output)
        self.assertEqual(Store.objects.count(), 3)
        self.assertEqual(Review.objects.count(), 5)

    def test_top_stores_after_seeding(self):
        self._seed()

        top = list(Store.objects.top_stores())

        self.assertEqual([s.name for s in top], ["Bakery Bonjour", "Night Owl Noodles"])

    def test_reset_removes_existing_stores(self):
        self._seed()
        Store.objects.create_store(
            name="Extra",
            address="x",
            longitude=0,
            latitude=0,
            author=User.objects.first(),
        )

        self._seed("--reset")

        self.assertFalse(Store.objects.filter(name="Extra").exists())
        self.assertEqual(Store.objects.count(), 3)

    def test_empty_password_is_rejected(self):
        with self.assertRaises(CommandError):
            self._seed("--password", "")
