"""Reconcile codex followers with store followers (pets)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codexsync.domain.model import AuthoritativeFollower, EntityKind

from .checker import attribute_field, id_collection_field
from .context import id_label
from .convert import follower_from_reference
from .errors import FixAbortedError
from .match import SlugIndex
from .resolve import resolve_ids, uri_table
from .tables import EMPTY_DESCRIPTION

if TYPE_CHECKING:
    from collections.abc import Callable

    from codexsync.domain.model import ReferenceFollower

    from .context import PassContext


def reconcile_followers(context: PassContext) -> None:
    followers = context.authoritative.followers
    index = SlugIndex(EntityKind.FOLLOWER, followers)
    codex_only = context.report_missing(EntityKind.FOLLOWER, context.reference.followers, index)
    if context.fix and codex_only:
        context.create_missing(
            EntityKind.FOLLOWER,
            [follower_from_reference(follower, context.authoritative) for follower in codex_only],
        )
        index = SlugIndex(EntityKind.FOLLOWER, followers)

    skills = context.authoritative.skills
    skill_uris = uri_table(skills)
    skill_label = id_label(skills)
    linked_skill_ids = frozenset(skill.id for skill in skills if skill.cross_reference_uri)
    pairs = context.matched_pairs(EntityKind.FOLLOWER, context.reference.followers, index)
    for reference, entity in pairs:
        try:
            _check_follower(context, skill_uris, skill_label, linked_skill_ids, reference, entity)
        except FixAbortedError as exc:
            context.failed(EntityKind.FOLLOWER, reference.slug, exc)


def _check_follower(
    context: PassContext,
    skill_uris: dict[str, int],
    skill_label: Callable[[int], str],
    linked_skill_ids: frozenset[int],
    reference: ReferenceFollower,
    entity: AuthoritativeFollower,
) -> None:
    check = context.checker(entity, context.authoritative.followers)

    check.check(attribute_field("name"), reference.name)
    check.check(attribute_field("icon", "image_name"), reference.icon)
    check.check(attribute_field("description"), reference.description or EMPTY_DESCRIPTION)
    check.check(attribute_field("tier"), reference.tier)
    if reference.cost is not None:
        check.check(attribute_field("cost"), reference.cost)

    abilities = context.accept(
        EntityKind.FOLLOWER,
        reference.name,
        "abilities",
        resolve_ids((link.uri for link in reference.abilities), skill_uris),
    )
    check.check(
        id_collection_field(
            "abilities",
            "skills",
            label=skill_label,
            subset=linked_skill_ids.__contains__,
        ),
        abilities,
    )
