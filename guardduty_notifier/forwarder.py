import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .config import ForwarderConfig
from .detection import classify_severity, is_suppressed_finding
from .formatters import build_slack_payload, extract_finding
from .services import DeliveryOutcome, DeliveryResult, send_slack_payload

logger = logging.getLogger(__name__)

STATUS_SUPPRESSED_TYPE = "suppressed_type"
STATUS_SUPPRESSED_SEVERITY = "suppressed_severity"
STATUS_SENT = "sent"
STATUS_CLIENT_ERROR = "client_error"
STATUS_FAILED = "failed"


@dataclass(frozen=True)
class ForwardResult:
    status: str
    payload: Optional[Dict] = None
    delivery: Optional[DeliveryResult] = None

    @property
    def ok(self) -> bool:
        return self.status != STATUS_FAILED

    @property
    def error(self) -> Optional[str]:
        if self.ok or self.delivery is None:
            return None
        if self.delivery.outcome is DeliveryOutcome.TRANSPORT_ERROR:
            return f"Network error when posting message: {self.delivery.error}"
        return f"Server error when processing message: {self.delivery.status_code} - {self.delivery.reason}"


def forward_finding(event: Dict, config: ForwarderConfig) -> ForwardResult:
    """
    Processa um evento de finding do GuardDuty e envia (ou não) uma mensagem ao Slack.

    Ordem:
    1. tipo suprimido por regra fixa -> sucesso sem envio
    2. extração dos campos do finding
    3. classificação de severidade e decisão de skip pelo nível mínimo
    4. montagem do payload (sempre, mesmo quando não será enviado)
    5. envio único, se não suprimido
    6. interpretação da resposta
    """
    detail = event.get('detail') if isinstance(event, dict) else None
    finding_type = detail.get('type') if isinstance(detail, dict) else None
    if is_suppressed_finding(finding_type):
        logger.info(f"Finding suprimido por tipo: {finding_type}")
        return ForwardResult(status=STATUS_SUPPRESSED_TYPE)

    finding = extract_finding(event)
    classification = classify_severity(finding.severity, config.min_severity)
    payload = build_slack_payload(finding, classification, config)

    if classification.skip:
        logger.info(
            f"Finding {finding.id} suprimido por severidade: score={finding.severity!r} "
            f"nivel={classification.level} min={config.min_severity}"
        )
        return ForwardResult(status=STATUS_SUPPRESSED_SEVERITY, payload=payload)

    delivery = send_slack_payload(config.webhook_url, payload, config.request_timeout)

    if delivery.outcome is DeliveryOutcome.SUCCESS:
        status = STATUS_SENT
    elif delivery.outcome is DeliveryOutcome.CLIENT_ERROR:
        status = STATUS_CLIENT_ERROR
    else:
        status = STATUS_FAILED
    return ForwardResult(status=status, payload=payload, delivery=delivery)
