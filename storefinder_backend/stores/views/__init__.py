from .api import StoreViewSet, search_stores, tags_list
from .pages import add_store, edit_store, store_detail, store_list, tags, top_stores

__all__ = [
    "StoreViewSet",
    "add_store",
    "edit_store",
    "search_stores",
    "store_detail",
    "store_list",
    "tags",
    "tags_list",
    "top_stores",
]
