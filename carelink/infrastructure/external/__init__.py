from carelink.infrastructure.external.notification_client import HttpNotificationGateway, LogOnlyNotificationGateway

__all__ = ["HttpNotificationGateway", "LogOnlyNotificationGateway"]
