"""Reconcile codex spells with store skills."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codexsync.domain.model import AuthoritativeSkill, EntityKind

from .checker import attribute_field, id_collection_field
from .context import id_label
from .convert import skill_from_reference
from .errors import FixAbortedError
from .exclusions import Scope, is_excluded
from .match import SlugIndex
from .resolve import name_table, resolve_status_effects
from .tables import EMPTY_DESCRIPTION, PASSIVE_SKILL_TYPE

if TYPE_CHECKING:
    from collections.abc import Callable

    from codexsync.domain.model import ReferenceSkill

    from .context import PassContext


def reconcile_skills(context: PassContext) -> None:
    skills = context.authoritative.skills
    passive_type_id = name_table(context.static.skill_types).get(PASSIVE_SKILL_TYPE)
    index = SlugIndex(EntityKind.SKILL, skills)
    codex_only = context.report_missing(
        EntityKind.SKILL,
        context.reference.skills,
        index,
        # Passives have no codex page.
        skip_authoritative=lambda skill: passive_type_id is not None
        and skill.type_id == passive_type_id,
    )
    if context.fix and codex_only:
        context.create_missing(
            EntityKind.SKILL,
            [skill_from_reference(skill, context.authoritative) for skill in codex_only],
        )
        index = SlugIndex(EntityKind.SKILL, skills)

    status_label = id_label(context.static.status_effects)
    pairs = context.matched_pairs(EntityKind.SKILL, context.reference.skills, index)
    for reference, entity in pairs:
        try:
            _check_skill(context, status_label, reference, entity)
        except FixAbortedError as exc:
            context.failed(EntityKind.SKILL, reference.slug, exc)


def _check_skill(
    context: PassContext,
    status_label: Callable[[int], str],
    reference: ReferenceSkill,
    entity: AuthoritativeSkill,
) -> None:
    kind = EntityKind.SKILL
    check = context.checker(entity, context.authoritative.skills)

    check.check(attribute_field("description"), reference.description or EMPTY_DESCRIPTION)
    check.check(attribute_field("tier"), reference.tier)
    check.check(attribute_field("bought"), reference.bought_at_arcanist)
    if reference.cost is not None:
        check.check(attribute_field("cost"), reference.cost)

    causes = context.accept(
        kind, reference.name, "causes", resolve_status_effects(reference.causes, context.static)
    )
    check.check(id_collection_field("causes", "causes", label=status_label), causes)

    if not is_excluded(Scope.REFERENCE_SKILL, slug=reference.slug, field_name="gives"):
        gives = context.accept(
            kind, reference.name, "gives", resolve_status_effects(reference.gives, context.static)
        )
        check.check(id_collection_field("gives", "gives", label=status_label), gives)
