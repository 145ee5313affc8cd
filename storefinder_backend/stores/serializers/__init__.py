from .store import (
    NearbyStoreSerializer,
    StoreLocationSerializer,
    StoreSearchResultSerializer,
    StoreSerializer,
    TagCountSerializer,
    TopStoreSerializer,
)

__all__ = [
    "NearbyStoreSerializer",
    "StoreLocationSerializer",
    "StoreSearchResultSerializer",
    "StoreSerializer",
    "TagCountSerializer",
    "TopStoreSerializer",
]
