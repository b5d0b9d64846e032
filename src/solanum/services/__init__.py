"""Services layer for Solanum: configuration and notifications."""

from .config_service import ConfigService
from .notification_service import Notifier

__all__ = ["ConfigService", "Notifier"]
