# reviews/views.py

import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_POST

from reviews.forms import ReviewForm
from reviews.models import Review
from stores.models import Store
from users.decorators import login_required_with_flash, redirect_back

logger = logging.getLogger(__name__)


@login_required_with_flash
@require_POST
def add_review(request, store_id: int):
    store = get_object_or_404(Store, pk=store_id)

    form = ReviewForm(request.POST, instance=Review(author=request.user, store=store))
    if not form.is_valid():
        for errors in form.errors.values():
            for error in errors:
                messages.error(request, error)
        return redirect_back(request, fallback=store.get_absolute_url())

    review = form.save()
    logger.info(
        "Review saved",
        extra={"review_id": review.pk, "store_id": store.pk, "rating": review.rating},
    )

    messages.success(request, "Review Saved!")
    return redirect_back(request, fallback=store.get_absolute_url())
