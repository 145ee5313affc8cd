# reviews/urls.py

from django.urls import path

from .views import add_review

app_name = "reviews"

urlpatterns = [
    path("reviews/<int:store_id>/", add_review, name="add-review"),
]
