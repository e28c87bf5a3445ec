import logging
from dataclasses import dataclass
from typing import Any

from .constants import SEVERITY_LEVELS, SUPPRESSED_FINDING_TYPE
from .utils import coerce_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeverityClassification:
    level: str
    label: str
    color: str
    skip: bool


def is_suppressed_finding(finding_type: Any) -> bool:
    return finding_type == SUPPRESSED_FINDING_TYPE


def get_severity_level(score: Any) -> str:
    """
    Classifica o score na ordem low -> medium -> high (primeira faixa vence).
    NaN/None/não numérico não casa com nenhuma comparação e cai em 'default'.
    """
    value = coerce_score(score)
    if value < SEVERITY_LEVELS["low"]["threshold_max"]:
        return "low"
    elif value < SEVERITY_LEVELS["medium"]["threshold_max"]:
        return "medium"
    elif value >= SEVERITY_LEVELS["high"]["threshold_min"]:
        return "high"
    return "default"


def get_severity_config(severity_level: str) -> dict:
    level_config = SEVERITY_LEVELS.get(severity_level) or SEVERITY_LEVELS["default"]
    return {
        "label": level_config["label"],
        "color": level_config["color"],
        "notify_on": level_config["notify_on"],
    }


def should_skip(severity_level: str, min_severity: str) -> bool:
    notify_on = get_severity_config(severity_level)["notify_on"]
    if notify_on is None:
        return False
    return min_severity not in notify_on


def classify_severity(score: Any, min_severity: str) -> SeverityClassification:
    level = get_severity_level(score)
    config = get_severity_config(level)
    skip = should_skip(level, min_severity)
    logger.debug(f"Severidade classificada: score={score!r} nivel={level} min={min_severity} skip={skip}")
    return SeverityClassification(level=level, label=config["label"], color=config["color"], skip=skip)
