"""API routes."""

from invitelink.interface.api.routes import checkin, events, health, invites

__all__ = ["checkin", "events", "health", "invites"]
