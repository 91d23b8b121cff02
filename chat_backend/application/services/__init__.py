"""Application services shared by several handlers."""

from chat_backend.application.services.groups import load_group
from chat_backend.application.services.view_assembler import ChatViewAssembler

__all__ = ["ChatViewAssembler", "load_group"]
