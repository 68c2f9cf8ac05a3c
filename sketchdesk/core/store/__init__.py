"""Durable key-value store backing the application settings."""

from .json_store import JsonStore

__all__ = ["JsonStore"]
