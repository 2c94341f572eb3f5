"""Repository interfaces for Pomotodo."""

from .repository import TaskRepository

__all__ = ["TaskRepository"]
