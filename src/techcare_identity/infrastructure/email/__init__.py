from techcare_identity.infrastructure.email.email_service import EmailNotifier, Notifier

__all__ = ["EmailNotifier", "Notifier"]
