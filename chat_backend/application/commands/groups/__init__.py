"""Group management commands."""

from .create_group import CreateGroupCommand, CreateGroupHandler
from .rename_group import RenameGroupCommand, RenameGroupHandler
from .change_membership import (
    AddMemberCommand,
    AddMemberHandler,
    RemoveMemberCommand,
    RemoveMemberHandler,
)

__all__ = [
    "CreateGroupCommand",
    "CreateGroupHandler",
    "RenameGroupCommand",
    "RenameGroupHandler",
    "AddMemberCommand",
    "AddMemberHandler",
    "RemoveMemberCommand",
    "RemoveMemberHandler",
]
