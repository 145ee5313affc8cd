# stores/tests/factories.py

from itertools import count

from django.contrib.auth import get_user_model

from reviews.models import Review
from stores.models import Store

User = get_user_model()

_seq = count(1)

# Hamilton, ON
HAMILTON_LNG = -79.8711
HAMILTON_LAT = 43.2557


def make_user(**overrides):
    n = next(_seq)
    data = {
        "email": f"user{n}@example.com",
        "password": "pw",
        "name": f"User {n}",
    }
    data.update(overrides)
    return User.objects.create_user(**data)


def make_store(author=None, *, name="Test Store", tags=(), lng=HAMILTON_LNG, lat=HAMILTON_LAT, **overrides):
    fields = {
        "name": name,
        "description": "",
        "address": "1 Main St, Hamilton",
        "longitude": lng,
        "latitude": lat,
        "author": author or make_user(),
    }
    fields.update(overrides)
    return Store.objects.create_store(tags=tags, **fields)


def make_review(store, rating, author=None, text="Nice"):
    return Review.objects.create(
        store=store,
        author=author or make_user(),
        rating=rating,
        text=text,
    )
