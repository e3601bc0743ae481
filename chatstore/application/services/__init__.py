"""
Application services.

Exports:
  - SessionService: Session lifecycle with cache maintenance
  - MessageService: Message append and paged history
"""

from chatstore.application.services.message_service import MessageService
from chatstore.application.services.session_service import SessionService

__all__ = ["MessageService", "SessionService"]
