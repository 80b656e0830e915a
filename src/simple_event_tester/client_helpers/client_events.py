"""Chat client event names consumed by the convenience waiters."""

from __future__ import annotations

from enum import Enum


class ClientEvent(str, Enum):
    """Event names emitted by the chat client."""

    MESSAGE_CREATE = "messageCreate"
    MESSAGE_UPDATE = "messageUpdate"
    MESSAGE_DELETE = "messageDelete"
    MESSAGE_REACTION_ADD = "messageReactionAdd"
    MESSAGE_REACTION_REMOVE = "messageReactionRemove"
    GUILD_CREATE = "guildCreate"
