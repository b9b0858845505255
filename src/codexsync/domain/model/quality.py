"""Item quality tiers and the bonus scaling they apply.

The reference codex may show an item at any quality tier while the
authoritative store keeps the common-quality figures. The helpers below scale
a common value up to a tier and back down again.
"""

from __future__ import annotations

from enum import StrEnum


class QualityTier(StrEnum):
    BROKEN = "broken"
    POOR = "poor"
    COMMON = "common"
    SUPERIOR = "superior"
    FAMED = "famed"
    LEGENDARY = "legendary"
    ORNATE = "ornate"
    MASTERFORGED = "masterforged"
    DEMONFORGED = "demonforged"
    GODFORGED = "godforged"

    @property
    def multiplier(self) -> float:
        return _MULTIPLIERS[self]


_MULTIPLIERS: dict[QualityTier, float] = {
    QualityTier.BROKEN: 0.1,
    QualityTier.POOR: 1.0,
    QualityTier.COMMON: 1.0,
    QualityTier.SUPERIOR: 1.10,
    QualityTier.FAMED: 1.15,
    QualityTier.LEGENDARY: 1.20,
    QualityTier.ORNATE: 1.25,
    QualityTier.MASTERFORGED: 1.30,
    QualityTier.DEMONFORGED: 1.40,
    QualityTier.GODFORGED: 1.50,
}

BONUS_PRECISION = 2


def scaled_bonus(common: float, quality: QualityTier) -> float:
    """Percentage bonus of an item at ``quality`` given its common-quality bonus."""

    if common == 0:
        return 0.0
    return round(((common / 100 + 1) * quality.multiplier - 1) * 100, BONUS_PRECISION)


def common_bonus(observed: float, quality: QualityTier) -> float:
    """Inverse of :func:`scaled_bonus`."""

    if observed == 0 or quality.multiplier == 1.0:
        return round(float(observed), BONUS_PRECISION)
    return round(((observed / 100 + 1) / quality.multiplier - 1) * 100, BONUS_PRECISION)
