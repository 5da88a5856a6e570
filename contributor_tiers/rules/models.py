from typing import Literal

from pydantic import BaseModel, Field, field_validator

from contributor_tiers.components.tiers.models import (
    DEFAULT_TIER_STYLES,
    DEFAULT_TIER_THRESHOLDS,
    Tier,
    TierStyle,
    TierThresholds,
)


class ThresholdRule(BaseModel):
    tier: Tier
    upper_bound: float = Field(gt=0, le=1)

class StyleRule(BaseModel):
    label: str
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    bg_class: str = ""
    text_class: str = ""

def _default_threshold_rules() -> list[ThresholdRule]:
    return [
        ThresholdRule(tier=tier, upper_bound=bound)
        for bound, tier in DEFAULT_TIER_THRESHOLDS.as_pairs()
    ]

def _default_style_rules() -> dict[Tier, StyleRule]:
    return {
        tier: StyleRule(
            label=style.label,
            color=style.color,
            bg_class=style.bg_class,
            text_class=style.text_class,
        )
        for tier, style in DEFAULT_TIER_STYLES.items()
    }

class TiersRules(BaseModel):
    thresholds: list[ThresholdRule] = Field(default_factory=_default_threshold_rules)
    styles: dict[Tier, StyleRule] = Field(default_factory=_default_style_rules)

    @field_validator("thresholds")
    @classmethod
    def _check_thresholds(cls, value: list[ThresholdRule]) -> list[ThresholdRule]:
        # TierThresholds raises ValueError on an invalid table
        TierThresholds.from_pairs([(rule.upper_bound, rule.tier) for rule in value])
        return value

    @field_validator("styles")
    @classmethod
    def _fill_styles(cls, value: dict[Tier, StyleRule]) -> dict[Tier, StyleRule]:
        # Tiers left out of the file keep their default style
        return {**_default_style_rules(), **value}

    def to_thresholds(self) -> TierThresholds:
        return TierThresholds.from_pairs(
            [(rule.upper_bound, rule.tier) for rule in self.thresholds]
        )

    def to_styles(self) -> dict[Tier, TierStyle]:
        return {
            tier: TierStyle(
                label=rule.label,
                color=rule.color,
                bg_class=rule.bg_class,
                text_class=rule.text_class,
            )
            for tier, rule in self.styles.items()
        }

class LoggingRules(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

class Rules(BaseModel):
    tiers: TiersRules = Field(default_factory=TiersRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
