"""Lightweight in-process event bus.

Use-cases publish application events; the Qt bridge subscribes and forwards
them to the front-end.
"""

from .event_bus import EventBus, Subscription
from .events import AppStateChanged

__all__ = ["AppStateChanged", "EventBus", "Subscription"]
