"""Chat backend: users, direct conversations and group chats over REST."""
