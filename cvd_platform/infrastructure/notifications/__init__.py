from .notification_feed import NotificationFeed

__all__ = ["NotificationFeed"]
