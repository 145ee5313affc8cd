from .store import Store, StoreManager, StoreQuerySet, StoreTag

__all__ = [
    "Store",
    "StoreManager",
    "StoreQuerySet",
    "StoreTag",
]
