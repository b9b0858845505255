from __future__ import annotations

import pytest

from codexsync.domain.model import QualityTier, common_bonus, scaled_bonus


def test_common_bonus_scales_down_to_common_quality() -> None:
    assert common_bonus(32.0, QualityTier.LEGENDARY) == pytest.approx(10.0)
    assert common_bonus(12.0, QualityTier.COMMON) == 12.0


def test_zero_bonus_stays_zero() -> None:
    assert common_bonus(0, QualityTier.GODFORGED) == 0.0
    assert scaled_bonus(0, QualityTier.GODFORGED) == 0.0


@pytest.mark.parametrize("quality", list(QualityTier))
def test_scaled_bonus_inverts_common_bonus(quality: QualityTier) -> None:
    observed = scaled_bonus(20.0, quality)

    assert common_bonus(observed, quality) == pytest.approx(20.0, abs=0.01)
