import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import requests

from .formatters import encode_payload

logger = logging.getLogger(__name__)


class DeliveryOutcome(Enum):
    SUCCESS = "success"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class DeliveryResult:
    outcome: DeliveryOutcome
    status_code: Optional[int] = None
    reason: str = ""
    body: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        # Erro 4xx é registrado mas não falha a invocação
        return self.outcome in (DeliveryOutcome.SUCCESS, DeliveryOutcome.CLIENT_ERROR)


def classify_status(status_code: int) -> DeliveryOutcome:
    if status_code < 400:
        return DeliveryOutcome.SUCCESS
    elif status_code < 500:
        return DeliveryOutcome.CLIENT_ERROR
    return DeliveryOutcome.SERVER_ERROR


def send_slack_payload(webhook_url: str, payload: Dict, timeout: float) -> DeliveryResult:
    """
    Faz exatamente um POST do payload para o webhook do Slack, sem retry.
    Falhas de rede (DNS, TLS, conexão, timeout) viram TRANSPORT_ERROR.
    """
    body = encode_payload(payload)
    headers = {
        "Content-Type": "application/json",
        "Content-Length": str(len(body)),
    }

    try:
        resp = requests.post(webhook_url, data=body, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        logger.error(f"Falha de rede ao enviar mensagem para o Slack: {exc}")
        return DeliveryResult(outcome=DeliveryOutcome.TRANSPORT_ERROR, error=str(exc))

    outcome = classify_status(resp.status_code)
    result = DeliveryResult(
        outcome=outcome,
        status_code=resp.status_code,
        reason=resp.reason or "",
        body=resp.text or "",
    )

    if outcome is DeliveryOutcome.SUCCESS:
        logger.info("Message posted successfully")
    elif outcome is DeliveryOutcome.CLIENT_ERROR:
        logger.error(f"Error posting message to Slack API: {resp.status_code} - {resp.reason}")
    else:
        logger.error(f"Server error when processing message: {resp.status_code} - {resp.reason}")
    logger.debug(f"Slack response: {resp.status_code} {result.body}")
    return result
