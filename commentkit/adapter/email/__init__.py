"""Outbound e-mail adapters."""

from .resend import MockEmailSender, ResendEmailSender, SentEmail

__all__ = ["MockEmailSender", "ResendEmailSender", "SentEmail"]
