# reviews/tests/test_reviews.py

from django.contrib.messages import get_messages
from django.db import IntegrityError
from django.test import TestCase
from django.urls import reverse

from reviews.models import Review
from stores.tests.factories import make_store, make_user
from users.decorators import LOGIN_REQUIRED_MESSAGE


def _messages(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


class AddReviewTests(TestCase):
    """
    POST /reviews/<store_id>/

    GUARANTEES:
    - Session required
    - Rating must be 1..5
    - Success flashes and sends the user back to where they came from
    """

    def setUp(self):
        self.store = make_store(name="Bakery Bonjour")
        self.user = make_user()
        self.url = reverse("reviews:add-review", args=[self.store.pk])

    def test_anonymous_is_sent_to_login(self):
        response = self.client.post(self.url, {"text": "Yum", "rating": "5"})

        self.assertRedirects(response, reverse("users:login"), fetch_redirect_response=False)
        self.assertIn(LOGIN_REQUIRED_MESSAGE, _messages(response))
        self.assertFalse(Review.objects.exists())

    def test_add_review(self):
        self.client.force_login(self.user)

        response = self.client.post(self.url, {"text": "Best croissant in town.", "rating": "5"})

        self.assertRedirects(response, self.store.get_absolute_url(), fetch_redirect_response=False)
        self.assertIn("Review Saved!", _messages(response))
        review = Review.objects.get()
        self.assertEqual(review.author, self.user)
        self.assertEqual(review.store, self.store)
        self.assertEqual(review.rating, 5)

    def test_rating_out_of_range_is_rejected(self):
        self.client.force_login(self.user)

        response = self.client.post(self.url, {"text": "Meh", "rating": "6"})

        self.assertRedirects(response, self.store.get_absolute_url(), fetch_redirect_response=False)
        self.assertFalse(Review.objects.exists())

    def test_get_is_not_allowed(self):
        self.client.force_login(self.user)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, 405)

    def test_unknown_store_is_404(self):
        self.client.force_login(self.user)

        response = self.client.post(
            reverse("reviews:add-review", args=[self.store.pk + 1000]),
            {"text": "Yum", "rating": "5"},
        )

        self.assertEqual(response.status_code, 404)


class ReviewConstraintTests(TestCase):
    def test_database_rejects_rating_outside_range(self):
        store = make_store()

        with self.assertRaises(IntegrityError):
            Review.objects.create(store=store, author=make_user(), rating=0, text="x")
