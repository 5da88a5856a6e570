"""
Adapter exposing a loaded rules file through the tiers rules port.
"""

from __future__ import annotations

from contributor_tiers.components.tiers.models import Tier, TierStyle, TierThresholds
from contributor_tiers.rules.models import Rules


class RulesTierAdapter:
    """TierRulesPort backed by a validated Rules object."""

    def __init__(self, rules: Rules) -> None:
        self._thresholds = rules.tiers.to_thresholds()
        self._styles = rules.tiers.to_styles()

    def get_thresholds(self) -> TierThresholds:
        return self._thresholds

    def get_styles(self) -> dict[Tier, TierStyle]:
        return dict(self._styles)
