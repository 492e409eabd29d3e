from .metadatable_base import Metadatable, Snapshot, deep_update

__all__ = ["Metadatable", "Snapshot", "deep_update"]
