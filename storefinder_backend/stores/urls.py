# stores/urls.py

from django.urls import path

from stores.views import add_store, edit_store, store_detail, store_list, tags, top_stores

app_name = "stores"

urlpatterns = [
    path("", store_list, name="store-list"),
    path("stores/", store_list, name="stores"),
    path("stores/page/<int:page>/", store_list, name="store-list-page"),
    path("add/", add_store, name="add-store"),
    path("stores/<int:pk>/edit/", edit_store, name="edit-store"),
    path("store/<slug:slug>/", store_detail, name="store-detail"),
    path("tags/", tags, name="tags"),
    path("tags/<str:tag>/", tags, name="tag"),
    path("top/", top_stores, name="top-stores"),
]
