"""
User records module.

Local mirror of users authenticated by the external identity platform.

Public API:
- IUserRecordStore: Interface for user record persistence
- LocalUserRecord: Local user record model
- InMemoryUserRecordStore: Development/testing store
"""

from .interfaces import IUserRecordStore
from .models import LocalUserRecord
from .service import InMemoryUserRecordStore

__all__ = [
    "IUserRecordStore",
    "LocalUserRecord",
    "InMemoryUserRecordStore",
]
