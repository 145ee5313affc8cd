# stores/models/store.py

"""
STORE MODEL

Shape:
- name (required, trimmed), slug (derived from name, UNIQUE), description
- tags: ordered list of strings, persisted as StoreTag rows (position keeps order)
- location: GeoJSON-like point {"type": "Point", "coordinates": [lng, lat], "address": ...}
- photo: stored file reference, author: the owning user

Query policy:
- reviews are never loaded implicitly; ask for them with .with_reviews()
  (or .visible(include_reviews=True))
- tags_list() / top_stores() are aggregations executed by the database
- search() ranks any-term matches; on PostgreSQL it uses the store_search_idx
  full-text index (see services/search.py)
"""

from __future__ import annotations

from django.apps import apps
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models, transaction
from django.db.models import Avg, Count, Prefetch
from django.urls import reverse
from django.utils import timezone

from stores.services import geo
from stores.services.search import search_stores
from stores.services.slugs import save_with_unique_slug

TOP_STORES_LIMIT = 10
TOP_STORES_MIN_REVIEWS = 2
NEAR_RESULTS_LIMIT = 10
SEARCH_RESULTS_LIMIT = 5


class StoreQuerySet(models.QuerySet):
    def with_tags(self):
        return self.prefetch_related("tag_rows")

    def with_reviews(self):
        Review = apps.get_model("reviews", "Review")
        return self.prefetch_related(
            Prefetch(
                "reviews",
                queryset=Review.objects.select_related("author").order_by("-created"),
            )
        )

    def visible(self, *, include_reviews: bool = False):
        qs = self.select_related("author").with_tags()
        if include_reviews:
            qs = qs.with_reviews()
        return qs

    def tagged(self, tag: str):
        return self.filter(tag_rows__name=tag).distinct()

    def tags_list(self) -> list[dict]:
        """
        One row per tag value with its number of occurrences, most used first.
        Ties are ordered by tag name.
        """
        rows = (
            StoreTag.objects.filter(store__in=self)
            .values("name")
            .annotate(count=Count("id"))
            .order_by("-count", "name")
        )
        return [{"tag": row["name"], "count": row["count"]} for row in rows]

    def top_stores(self):
        """
        Stores with at least two reviews, best mean rating first, at most ten.
        Each row carries `average_rating` and `review_count`.
        """
        return (
            self.annotate(
                review_count=Count("reviews"),
                average_rating=Avg("reviews__rating"),
            )
            .filter(review_count__gte=TOP_STORES_MIN_REVIEWS)
            .order_by("-average_rating", "-review_count", "name")[:TOP_STORES_LIMIT]
        )

    def search(self, query: str):
        """
        Stores matching any term of `query` in name or description, most
        relevant first, at most five. Each row carries `rank`.
        """
        return search_stores(self, query)[:SEARCH_RESULTS_LIMIT]

    def near(self, lng, lat, *, max_distance: float | None = None, limit: int = NEAR_RESULTS_LIMIT) -> list:
        """
        Stores within `max_distance` metres of (lng, lat), nearest first.
        Each returned store has a `distance` attribute (metres).
        """
        lng, lat = geo.parse_coordinates(lng, lat)
        if max_distance is None:
            max_distance = settings.MAP_DEFAULT_DISTANCE_METERS

        box = geo.bounding_box(lng, lat, max_distance)
        qs = self.filter(latitude__gte=box.min_lat, latitude__lte=box.max_lat)
        if box.min_lng >= -180.0 and box.max_lng <= 180.0:
            qs = qs.filter(longitude__gte=box.min_lng, longitude__lte=box.max_lng)

        found = []
        for store in qs:
            store.distance = geo.haversine_meters(lng, lat, store.longitude, store.latitude)
            if store.distance <= max_distance:
                found.append(store)

        found.sort(key=lambda s: s.distance)
        return found[:limit]


class StoreManager(models.Manager.from_queryset(StoreQuerySet)):
    @transaction.atomic
    def create_store(self, *, tags=(), **fields):
        store = self.model(**fields)
        store.save(using=self._db)
        if tags:
            store.set_tags(tags)
        return store


class Store(models.Model):
    LOCATION_POINT = "Point"

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=280, unique=True, blank=True)
    description = models.TextField(blank=True)
    created = models.DateTimeField(default=timezone.now)

    location_type = models.CharField(max_length=20, default=LOCATION_POINT)
    longitude = models.FloatField(
        validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)],
    )
    latitude = models.FloatField(
        validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)],
    )
    address = models.CharField(max_length=255)

    photo = models.CharField(max_length=255, blank=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="stores",
    )

    objects = StoreManager()

    class Meta:
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["latitude", "longitude"], name="store_location_idx"),
            models.Index(fields=["name"], name="store_name_idx"),
        ]

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_name = instance.__dict__.get("name")
        return instance

    @property
    def name_changed(self) -> bool:
        if self._state.adding or not self.slug:
            return True
        return self.name != getattr(self, "_loaded_name", None)

    def clean(self):
        super().clean()
        self.name = (self.name or "").strip()
        self.description = (self.description or "").strip()

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        self.description = (self.description or "").strip()

        if not self.name_changed:
            super().save(*args, **kwargs)
            return

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "slug" not in update_fields:
            kwargs["update_fields"] = [*update_fields, "slug"]

        save_with_unique_slug(self, super().save, *args, **kwargs)
        self._loaded_name = self.name

    def get_absolute_url(self):
        return reverse("stores:store-detail", kwargs={"slug": self.slug})

    # ---------------- location ----------------
    @property
    def coordinates(self) -> list[float]:
        return [self.longitude, self.latitude]

    @property
    def location(self) -> dict:
        return {
            "type": self.location_type,
            "coordinates": self.coordinates,
            "address": self.address,
        }

    # ---------------- tags ----------------
    @property
    def tags(self) -> list[str]:
        return [row.name for row in self.tag_rows.all()]

    def set_tags(self, tags) -> None:
        ordered = []
        for tag in tags or ():
            tag = (tag or "").strip()
            if tag and tag not in ordered:
                ordered.append(tag)

        with transaction.atomic():
            self.tag_rows.all().delete()
            StoreTag.objects.bulk_create(
                StoreTag(store=self, name=tag, position=i) for i, tag in enumerate(ordered)
            )

        # Drop any stale prefetch so .tags reflects the new rows
        prefetched = getattr(self, "_prefetched_objects_cache", None)
        if prefetched:
            prefetched.pop("tag_rows", None)

    def __str__(self):
        return self.name


class StoreTag(models.Model):
    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name="tag_rows")
    name = models.CharField(max_length=64)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["store", "name"], name="uniq_store_tag"),
        ]
        indexes = [
            models.Index(fields=["name"], name="store_tag_name_idx"),
        ]

    def __str__(self):
        return f"{self.store_id}:{self.name}"
