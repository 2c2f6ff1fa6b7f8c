"""
Database models package - shared declarative base and mixins
"""

from .base import Base, TimestampMixin

__all__ = ["Base", "TimestampMixin"]
