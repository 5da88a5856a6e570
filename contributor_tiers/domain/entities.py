from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
StatsPeriod = Literal["all_time", "ytd"]
Trend = Literal["up", "down", "stable"]

# --- Contributor Stats ---

class ContributorStats(BaseModel):
    """
    Synchronized activity for one contributor in one project and period.

    Accepts snake_case or camelCase keys, so serialized stats from the
    sync job load unchanged.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    project_id: str
    github_username: str
    period: StatsPeriod = "all_time"
    commits: int = 0
    prs_opened: int = 0
    prs_merged: int = 0
    reviews_done: int = 0
    additions: int = 0
    deletions: int = 0
    avg_weekly_commits: float = 0.0
    recent_weekly_commits: float = 0.0
    trend: Trend = "stable"
    avg_weekly_reviews: float = 0.0
    recent_weekly_reviews: float = 0.0
    review_trend: Trend = "stable"
