# stores/services/slugs.py

"""
STORE SLUGS

Slug rules:
- base slug = slugify(name)  ("Joe's Café" -> "joes-cafe")
- if other stores already use "base" or "base-<digits>" (case-insensitive),
  the new slug is "base-<count + 1>"; the first duplicate therefore gets "-2"
- the slug column is UNIQUE; a save that still collides (concurrent writer,
  gaps left by deletions) bumps the suffix and retries inside a savepoint
"""

from __future__ import annotations

import logging
import re

from django.db import IntegrityError, transaction
from django.utils.text import slugify

from stores.services.exceptions import SlugConflictError

logger = logging.getLogger(__name__)

SLUG_SAVE_ATTEMPTS = 10
FALLBACK_SLUG = "store"


def base_slug(name: str) -> str:
    return slugify(name or "") or FALLBACK_SLUG


def slug_family_regex(base: str) -> str:
    return rf"^{re.escape(base)}(-[0-9]*)?$"


def count_slug_family(store, base: str) -> int:
    """Stores (other than `store` itself) whose slug is `base` or `base-N`."""
    qs = type(store)._base_manager.filter(slug__iregex=slug_family_regex(base))
    if store.pk is not None:
        qs = qs.exclude(pk=store.pk)
    return qs.count()


def suggest_slug(store, base: str) -> str:
    existing = count_slug_family(store, base)
    if existing:
        return f"{base}-{existing + 1}"
    return base


def _slug_taken(store, slug: str) -> bool:
    qs = type(store)._base_manager.filter(slug=slug)
    if store.pk is not None:
        qs = qs.exclude(pk=store.pk)
    return qs.exists()


def save_with_unique_slug(store, save, *args, **kwargs) -> None:
    """
    Assign store.slug from store.name and persist through `save` (the model's
    own Model.save), retrying on slug uniqueness violations.
    """
    base = base_slug(store.name)
    store.slug = suggest_slug(store, base)
    suffix = count_slug_family(store, base) + 1

    for attempt in range(1, SLUG_SAVE_ATTEMPTS + 1):
        adding = store._state.adding
        try:
            with transaction.atomic():
                save(*args, **kwargs)
            return
        except IntegrityError:
            if not _slug_taken(store, store.slug):
                raise
            # Model.save() may have flipped these before the INSERT failed
            store._state.adding = adding
            if adding:
                store.pk = None

            logger.warning(
                "Slug collision on save, retrying",
                extra={"slug": store.slug, "attempt": attempt},
            )
            suffix += 1
            store.slug = f"{base}-{suffix}"

    raise SlugConflictError(
        f"Could not claim a unique slug for {store.name!r} after {SLUG_SAVE_ATTEMPTS} attempts"
    )
