import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from contributor_tiers.rules.models import Rules

DEFAULT_RULES_PATH = "contributor_tiers_rules.yaml"
RULES_PATH_ENV = "CONTRIBUTOR_TIERS_RULES"


def resolve_rules_path(path: str | Path | None = None) -> Path:
    """Explicit path, else $CONTRIBUTOR_TIERS_RULES, else the default file name."""
    if path is not None:
        return Path(path)
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        # An empty file means all defaults
        return Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
