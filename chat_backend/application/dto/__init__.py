"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- user.py         → UserDTO, UserSummaryDTO
- message.py      → MessageDTO
- conversation.py → ConversationDTO

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
Field names serialize in the wire format (`_id`, camelCase).
"""

from chat_backend.application.dto.user import UserDTO, UserSummaryDTO
from chat_backend.application.dto.message import MessageDTO
from chat_backend.application.dto.conversation import ConversationDTO

__all__ = [
    "UserDTO",
    "UserSummaryDTO",
    "MessageDTO",
    "ConversationDTO",
]
