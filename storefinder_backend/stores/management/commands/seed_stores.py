# stores/management/commands/seed_stores.py

from __future__ import annotations

from dataclasses import dataclass, field

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from reviews.models import Review
from stores.models import Store


@dataclass(frozen=True)
class SeedUserSpec:
    name: str
    email: str


@dataclass(frozen=True)
class SeedStoreSpec:
    name: str
    description: str
    address: str
    lng: float
    lat: float
    author_email: str
    tags: tuple[str, ...] = field(default_factory=tuple)


SEED_USERS = [
    SeedUserSpec("Wes Demo", "wes@example.com"),
    SeedUserSpec("Debbie Demo", "debbie@example.com"),
    SeedUserSpec("Beau Demo", "beau@example.com"),
]

SEED_STORES = [
    SeedStoreSpec(
        "Bakery Bonjour",
        "Croissants baked every morning and a quiet back room for working.",
        "12 Queen St W, Hamilton",
        -79.8711,
        43.2557,
        "wes@example.com",
        ("Wifi", "Family Friendly"),
    ),
    SeedStoreSpec(
        "Night Owl Noodles",
        "Hand-pulled noodles until 2am.",
        "88 James St N, Hamilton",
        -79.8687,
        43.2601,
        "debbie@example.com",
        ("Open Late", "Licensed"),
    ),
    SeedStoreSpec(
        "Green Leaf Cafe",
        "Plant-based bowls, smoothies and good coffee.",
        "5 Locke St S, Hamilton",
        -79.8861,
        43.2559,
        "beau@example.com",
        ("Vegetarian", "Wifi", "Family Friendly"),
    ),
]

# (store name, reviewer email, rating, text)
SEED_REVIEWS = [
    ("Bakery Bonjour", "debbie@example.com", 5, "Best croissant in town."),
    ("Bakery Bonjour", "beau@example.com", 4, "Great pastries, busy on weekends."),
    ("Night Owl Noodles", "wes@example.com", 4, "Saved me after a late shift."),
    ("Night Owl Noodles", "beau@example.com", 3, "Good broth, slow service."),
    ("Green Leaf Cafe", "wes@example.com", 5, "Even the meat lovers liked it."),
]


class Command(BaseCommand):
    help = "Seed demo users, stores and reviews (idempotent by email / store name)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--password",
            type=str,
            default="wes",
            help="Password for seeded users (default: wes)",
        )
        parser.add_argument(
            "--reset",
            action="store_true",
            help="Delete ALL stores and reviews before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        password = options.get("password") or ""
        if not password:
            raise CommandError("--password must not be empty.")

        User = get_user_model()

        if options.get("reset"):
            Review.objects.all().delete()
            Store.objects.all().delete()
            self.stdout.write(self.style.WARNING("Removed existing stores and reviews."))

        users = {}
        created_users = 0
        for seed in SEED_USERS:
            user = User.objects.filter(email__iexact=seed.email).first()
            if user is None:
                user = User.objects.create_user(email=seed.email, password=password, name=seed.name)
                created_users += 1
            users[seed.email] = user

        stores = {}
        created_stores = 0
        for seed in SEED_STORES:
            store = Store.objects.filter(name=seed.name).first()
            if store is None:
                store = Store.objects.create_store(
                    name=seed.name,
                    description=seed.description,
                    address=seed.address,
                    longitude=seed.lng,
                    latitude=seed.lat,
                    author=users[seed.author_email],
                    tags=seed.tags,
                )
                created_stores += 1
            stores[seed.name] = store

        created_reviews = 0
        for store_name, email, rating, text in SEED_REVIEWS:
            _, created = Review.objects.get_or_create(
                store=stores[store_name],
                author=users[email],
                defaults={"rating": rating, "text": text},
            )
            created_reviews += int(created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed complete: users={created_users} stores={created_stores} reviews={created_reviews}"
            )
        )
