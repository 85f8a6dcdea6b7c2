from .record import StorageRecord

__all__ = ["StorageRecord"]
