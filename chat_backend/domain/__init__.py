"""
DOMAIN LAYER

This layer contains:
- Entities: Business objects with identity (User, Conversation, Message)
- Value Objects: Immutable types (UserId, ConversationId, Username, PairKey)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
