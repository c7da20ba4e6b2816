"""Scheduled chat-space announcements: uniform, attendance and progress reminders."""

__version__ = "0.1.0"