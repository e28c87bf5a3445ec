import logging
from typing import Optional

from .config import ForwarderConfig
from .constants import DEBUG_MODE
from .forwarder import forward_finding

logger = logging.getLogger(__name__)
logging.getLogger("guardduty_notifier").setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)

_config: Optional[ForwarderConfig] = None


class ForwardingError(RuntimeError):
    """Falha de entrega que deve chegar ao runtime (retry/DLQ ficam a cargo dele)."""


def get_config() -> ForwarderConfig:
    # Lido uma vez por container do Lambda
    global _config
    if _config is None:
        _config = ForwarderConfig.from_env()
    return _config


def lambda_handler(event, context):
    logger.debug(f"Evento recebido: {event}")
    result = forward_finding(event, get_config())
    if not result.ok:
        raise ForwardingError(result.error)
    return {"status": result.status}
