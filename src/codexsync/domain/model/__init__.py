"""Public domain model surface."""

from __future__ import annotations

from codexsync.domain.model.authoritative import (
    AuthoritativeEntity,
    AuthoritativeFollower,
    AuthoritativeItem,
    AuthoritativeMonster,
    AuthoritativeSkill,
    AuthoritativeStatic,
    StaticEntry,
)
from codexsync.domain.model.dataset import (
    AuthoritativeCollection,
    AuthoritativeData,
    Dataset,
    IdentifiedRecord,
    ReferenceCollection,
    ReferenceData,
    SluggedRecord,
)
from codexsync.domain.model.enums import (
    NAMESPACE_BY_KIND,
    EntityKind,
    MonsterKind,
    ReferenceNamespace,
    ReferenceTag,
)
from codexsync.domain.model.quality import QualityTier, common_bonus, scaled_bonus
from codexsync.domain.model.reference import (
    ItemStats,
    ReferenceEntity,
    ReferenceFollower,
    ReferenceItem,
    ReferenceLink,
    ReferenceMonster,
    ReferenceSkill,
    reference_uri,
)

__all__ = [  # noqa: RUF022
    # enums
    "EntityKind",
    "MonsterKind",
    "NAMESPACE_BY_KIND",
    "ReferenceNamespace",
    "ReferenceTag",
    "QualityTier",
    # reference side
    "ItemStats",
    "ReferenceEntity",
    "ReferenceFollower",
    "ReferenceItem",
    "ReferenceLink",
    "ReferenceMonster",
    "ReferenceSkill",
    "reference_uri",
    # authoritative side
    "AuthoritativeEntity",
    "AuthoritativeFollower",
    "AuthoritativeItem",
    "AuthoritativeMonster",
    "AuthoritativeSkill",
    "AuthoritativeStatic",
    "StaticEntry",
    # aggregates
    "AuthoritativeCollection",
    "AuthoritativeData",
    "Dataset",
    "ReferenceCollection",
    "ReferenceData",
    "IdentifiedRecord",
    "SluggedRecord",
    # quality
    "common_bonus",
    "scaled_bonus",
]
