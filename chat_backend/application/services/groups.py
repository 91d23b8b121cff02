"""Group lookup shared by the group commands and queries."""

from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.exceptions import EntityNotFoundError
from chat_backend.domain.ports.repositories import ConversationRepository
from chat_backend.domain.value_objects.conversation_id import ConversationId


async def load_group(
    conversation_repository: ConversationRepository, group_id: ConversationId
) -> Conversation:
    """Return the group with this id. Direct conversations do not count as groups."""
    conversation = await conversation_repository.get_by_id(group_id)
    if conversation is None or not conversation.is_group_chat:
        raise EntityNotFoundError("Group not found")
    return conversation
