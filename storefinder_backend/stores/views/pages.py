"""
PATH: stores/views/pages.py

STORE PAGES (server-rendered)

- Listing, detail, tag browser and top-rated page are public.
- Adding requires a session; editing additionally requires being the author.
- Form problems are flashed and the form is re-rendered; nothing here raises
  for user mistakes.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import messages
from django.core.paginator import Paginator
from django.db import transaction
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods

from reviews.forms import ReviewForm
from stores.forms import StoreForm
from stores.models import Store
from stores.services.photos import delete_photo, save_photo
from users.decorators import login_required_with_flash

logger = logging.getLogger(__name__)

NOT_OWNER_MESSAGE = "You must own a store in order to edit it!"


def _flash_form_errors(request, form) -> None:
    for errors in form.errors.values():
        for error in errors:
            messages.error(request, error)


# ---------------- LIST ----------------
def store_list(request, page: int = 1):
    stores = Store.objects.visible().order_by("-created")
    paginator = Paginator(stores, settings.STORES_PER_PAGE)

    if page < 1 or (page > paginator.num_pages and paginator.count):
        last = paginator.num_pages
        messages.info(
            request,
            f"Hey! You asked for page {page}. But that doesn't exist. So I put you on page {last}",
        )
        return redirect("stores:store-list-page", page=last)

    page_obj = paginator.get_page(page)
    return render(
        request,
        "stores/store_list.html",
        {
            "title": "Stores",
            "stores": page_obj.object_list,
            "page_obj": page_obj,
            "count": paginator.count,
        },
    )


# ---------------- DETAIL ----------------
def store_detail(request, slug: str):
    store = get_object_or_404(Store.objects.visible(include_reviews=True), slug=slug)
    return render(
        request,
        "stores/store_detail.html",
        {"title": store.name, "store": store, "review_form": ReviewForm()},
    )


# ---------------- ADD / EDIT ----------------
def _save_store(form) -> Store:
    store = form.instance
    upload = form.cleaned_data.get("photo")
    photo = save_photo(upload) if upload else None

    try:
        with transaction.atomic():
            if photo:
                store.photo = photo
            store.save()
            store.set_tags(form.cleaned_data.get("tags") or [])
    except Exception:
        # rolled back: no row points at the new file
        if photo:
            delete_photo(photo)
        raise
    return store


@login_required_with_flash
@require_http_methods(["GET", "POST"])
def add_store(request):
    if request.method == "GET":
        return render(request, "stores/edit_store.html", {"title": "Add Store", "form": StoreForm()})

    form = StoreForm(request.POST, request.FILES, instance=Store(author=request.user))
    if not form.is_valid():
        _flash_form_errors(request, form)
        return render(
            request,
            "stores/edit_store.html",
            {"title": "Add Store", "form": form},
            status=400,
        )

    store = _save_store(form)
    logger.info("Store created", extra={"store_id": store.pk, "slug": store.slug})

    messages.success(request, f"Successfully Created {store.name}. Care to leave a review?")
    return redirect("stores:store-detail", slug=store.slug)


@login_required_with_flash
@require_http_methods(["GET", "POST"])
def edit_store(request, pk: int):
    store = get_object_or_404(Store.objects.visible(), pk=pk)
    if store.author_id != request.user.pk:
        messages.error(request, NOT_OWNER_MESSAGE)
        return redirect("stores:store-list")

    title = f"Edit {store.name}"
    if request.method == "GET":
        return render(request, "stores/edit_store.html", {"title": title, "form": StoreForm(instance=store), "store": store})

    form = StoreForm(request.POST, request.FILES, instance=store)
    if not form.is_valid():
        _flash_form_errors(request, form)
        return render(
            request,
            "stores/edit_store.html",
            {"title": title, "form": form, "store": store},
            status=400,
        )

    store = _save_store(form)
    logger.info("Store updated", extra={"store_id": store.pk, "slug": store.slug})

    messages.success(request, f"Successfully updated {store.name}.")
    return redirect("stores:edit-store", pk=store.pk)


# ---------------- TAGS ----------------
def tags(request, tag: str | None = None):
    tag_counts = Store.objects.tags_list()
    stores = Store.objects.visible()
    if tag:
        stores = stores.tagged(tag)
    else:
        stores = stores.filter(tag_rows__isnull=False).distinct()

    return render(
        request,
        "stores/tags.html",
        {"title": "Tags", "tags": tag_counts, "tag": tag, "stores": stores},
    )


# ---------------- TOP ----------------
def top_stores(request):
    return render(
        request,
        "stores/top_stores.html",
        {"title": "⭐ Top Stores!", "stores": Store.objects.top_stores()},
    )
