"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (Prisma repositories)
- security/: Password hashing and session token signing

Persistence modules import the generated Prisma client and are only loaded
by the DI container (chat_backend.setup.ioc.container).
"""
