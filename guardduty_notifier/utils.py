import math
from datetime import datetime, timezone
from typing import Any, Optional

from .constants import GUARDDUTY_CONSOLE_URL


def coerce_score(value: Any) -> float:
    """
    Converte o severity do finding para float.
    None, strings vazias e valores não numéricos viram NaN, que não casa com
    nenhuma faixa de severidade.
    """
    if value is None:
        return math.nan
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def to_epoch(timestamp_str: Optional[str]) -> Optional[int]:
    """Epoch Unix (segundos, arredondado para baixo) de um timestamp ISO 8601."""
    if not timestamp_str or not isinstance(timestamp_str, str):
        return None
    try:
        parsed = datetime.fromisoformat(timestamp_str.strip().replace('Z', '+00:00'))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return math.floor(parsed.timestamp())


def format_last_seen(updated_at: Optional[str]) -> str:
    # Macro de data do Slack: <!date^epoch^formato | texto alternativo>
    epoch = to_epoch(updated_at)
    epoch_text = str(epoch) if epoch is not None else "NaN"
    return f"<!date^{epoch_text}^{{date}} at {{time}} | {updated_at}>"


def build_console_url(region: str, finding_id: str) -> str:
    return f"{GUARDDUTY_CONSOLE_URL}/home?region={region}#/findings?search=id%3D{finding_id}"
