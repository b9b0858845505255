"""Constant lookup tables bridging codex and store vocabularies."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from codexsync.domain.model import ReferenceTag

_TEMPORARY_EFFECTS: Final[tuple[str, ...]] = (
    "Bloodshift",
    "Darkblight",
    "Dark Immune",
    "Dark Sigil",
    "Dragon Sigil",
    "Drakeblight",
    "Earthblight",
    "Earth Immune",
    "Earth Sigil",
    "Fireblight",
    "Fire Immune",
    "Fire Sigil",
    "Foresight ↑",
    "Foresight ↓",
    "Holyblight",
    "Holy Immune",
    "Holy Sigil",
    "Lightningblight",
    "Lightning Immune",
    "Lightning Sigil",
    "Lyon's Mark",
    "Target ↑",
    "Target ↑↑",
    "Target ↓",
    "Target ↓↓",
    "Tree of Demise",
    "Tree of Life",
    "Waterblight",
    "Water Immune",
    "Water Sigil",
    "Windblight",
    "Windswept",
)

STATUS_EFFECT_RENAMES: Final = MappingProxyType(
    {
        **{name: f"{name} [temp]" for name in _TEMPORARY_EFFECTS},
        "Brynhild": "Call of Brynhild",
        "Defending": "Defending [Magical]",
        "Dumbr": "Call of Dumbr",
        "Idun": "Call of Idun",
        "Jord": "Call of Jord",
        "Skadi": "Call of Skadi",
    }
)
"""Codex status effect name -> store status effect name, where they differ."""

WEAPON_ELEMENT_STATUSES: Final = MappingProxyType(
    {
        "Fire": ("Burning",),
        "Water": ("Frozen",),
        "Earthen": ("Rot",),
        "Lightning": ("Paralyzed",),
        "Holy": ("Blind",),
        "Dark": ("Asleep",),
        "Arcane": ("Burning", "Frozen", "Rot", "Paralyzed"),
        "Dragon": ("Blight",),
    }
)
"""Status effects a weapon inflicts through its element alone."""

WEAPON_ITEM_TYPE: Final[str] = "Weapon"
PASSIVE_SKILL_TYPE: Final[str] = "Passive"

RAID_SPAWNS: Final[frozenset[str]] = frozenset(
    {"Kingdom Raid", "World Raid", "World Raid year-round"}
)
"""Spawns that turn a boss into a raid."""

RAID_TAG_SPAWNS: Final = MappingProxyType(
    {
        ReferenceTag.WORLD_RAID: "World Raid",
        ReferenceTag.KINGDOM_RAID: "Kingdom Raid",
    }
)
"""Codex raid tags mirrored as spawns in the store. Other realms raids have no spawn."""

EVENT_SPAWN_PREFIXES: Final[tuple[str, ...]] = ("Event: ", "Past Event: ")

OFFHAND_SUFFIX: Final[str] = " [off-hand]"
ZWEI_SUFFIX: Final[str] = " [zwei]"
EMPTY_DESCRIPTION: Final[str] = "."


def translate_status_effect(name: str) -> str:
    return STATUS_EFFECT_RENAMES.get(name, name)


def event_name(spawn_name: str) -> str | None:
    """Event name carried by a spawn, or ``None`` when the spawn is not an event."""

    for prefix in EVENT_SPAWN_PREFIXES:
        if spawn_name.startswith(prefix):
            return spawn_name[len(prefix) :]
    return None


def sanitize_store_name(name: str) -> str:
    """Drop the bracketed qualifier the store appends to some names.

    ``"Shield Bash [off-hand]"`` becomes ``"Shield Bash"``.
    """

    head, bracket, _ = name.partition("[")
    if not bracket:
        return name
    return head.rstrip()
