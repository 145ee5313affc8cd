# stores/api_urls.py

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from stores.views import StoreViewSet, search_stores, tags_list

router = DefaultRouter()
router.register(r"stores", StoreViewSet, basename="stores")

urlpatterns = [
    path("search/", search_stores, name="store-search"),
    path("tags/", tags_list, name="tag-list"),
    path("", include(router.urls)),
]
