"""Default fields merged into message mocks before waiting."""

from __future__ import annotations

import copy
from collections.abc import Mapping

from simple_event_tester.configuration.runtime_settings import ClientIdentity

_IDENTITY_FIELDS = ("author", "guildId", "channelId")


def message_defaults(identity: ClientIdentity) -> dict[str, object]:
    """Default message mock for the configured test identity.

    Unset identifiers stay None, which the matcher treats as "don't care".
    """
    return {
        "content": "",
        "components": [],
        "embeds": [],
        "author": {"id": identity.user_id},
        "guildId": identity.guild_id,
        "channelId": identity.channel_id,
    }


def with_defaults(
    spec: object,
    defaults: Mapping[str, object],
    *,
    base: bool = False,
) -> object:
    """Return `spec` with default fields applied; never mutates its inputs.

    - `spec is True` accepts any message from the default author, guild and
      channel.
    - `base=True` fills every default whose key is missing or falsy in `spec`.
    - Otherwise `spec` is returned unchanged.
    """
    if spec is True:
        return {key: copy.deepcopy(defaults[key]) for key in _IDENTITY_FIELDS if key in defaults}
    if not base or not isinstance(spec, Mapping):
        return spec
    merged = dict(spec)
    for key, value in defaults.items():
        if not merged.get(key):
            merged[key] = copy.deepcopy(value)
    return merged
