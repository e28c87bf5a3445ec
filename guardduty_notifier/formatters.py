import json
from dataclasses import dataclass
from typing import Any, Dict

from .config import ForwarderConfig
from .constants import SLACK_ICON_URL, SLACK_USERNAME
from .detection import SeverityClassification
from .utils import build_console_url, format_last_seen


class InvalidEventError(ValueError):
    """Evento recebido não tem o formato de um finding do GuardDuty."""


@dataclass(frozen=True)
class Finding:
    type: str
    description: str
    updated_at: str
    account_id: str
    region: str
    id: str
    severity: Any


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def extract_finding(event: Dict) -> Finding:
    """
    Extrai os campos usados na notificação a partir do evento do EventBridge:
    { region, detail: { type, description, updatedAt, accountId, id, severity } }
    A região vem do nível do evento; detail.region é usado só como fallback.
    """
    if not isinstance(event, dict):
        raise InvalidEventError(f"Evento deve ser um objeto JSON, recebido {type(event).__name__}")
    detail = event.get('detail')
    if not isinstance(detail, dict):
        raise InvalidEventError("Evento sem bloco 'detail'")

    return Finding(
        type=_text(detail.get('type')),
        description=_text(detail.get('description')),
        updated_at=_text(detail.get('updatedAt')),
        account_id=_text(detail.get('accountId')),
        region=_text(event.get('region') or detail.get('region')),
        id=_text(detail.get('id')),
        severity=detail.get('severity'),
    )


def build_attachment(finding: Finding, classification: SeverityClassification) -> Dict:
    console_url = build_console_url(finding.region, finding.id)
    return {
        "fallback": f"{finding.type} - {console_url}",
        "pretext": f"*Finding in {finding.region} for Acct: {finding.account_id}*",
        "title": finding.type,
        "title_link": console_url,
        "text": finding.description,
        "fields": [
            {"title": "Severity", "value": classification.label, "short": True},
            {"title": "Region", "value": finding.region, "short": True},
            {"title": "Last Seen", "value": format_last_seen(finding.updated_at), "short": True},
        ],
        "mrkdwn_in": ["pretext"],
        "color": classification.color,
    }


def build_slack_payload(finding: Finding, classification: SeverityClassification, config: ForwarderConfig) -> Dict:
    return {
        "channel": config.channel,
        "text": "",
        "attachments": [build_attachment(finding, classification)],
        "username": SLACK_USERNAME,
        "mrkdwn": True,
        "icon_url": SLACK_ICON_URL,
    }


def encode_payload(payload: Dict) -> bytes:
    # Ordem das chaves é preservada: mesmo payload -> mesmos bytes
    return json.dumps(payload, ensure_ascii=False, separators=(',', ':')).encode('utf-8')
