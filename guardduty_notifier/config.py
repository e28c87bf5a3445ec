import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_MIN_SEVERITY, DEFAULT_REQUEST_TIMEOUT_SECONDS


class ConfigError(ValueError):
    """Configuração ausente ou inválida (falha de inicialização)."""


def _first_env(environ: Mapping[str, str], *names: str) -> Optional[str]:
    # Aceita o nome novo e o nome usado pela função original (camelCase)
    for name in names:
        value = environ.get(name)
        if value is not None and value.strip() != "":
            return value.strip()
    return None


@dataclass(frozen=True)
class ForwarderConfig:
    """
    Configuração do encaminhador, lida uma única vez na inicialização.

    min_severity é comparado por igualdade exata com "LOW"/"MEDIUM";
    qualquer outro valor exige severidade High.
    """
    webhook_url: str
    channel: str
    min_severity: str = DEFAULT_MIN_SEVERITY
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ForwarderConfig":
        if environ is None:
            environ = os.environ

        webhook_url = _first_env(environ, "SLACK_WEBHOOK_URL", "webhookUrl")
        if not webhook_url:
            raise ConfigError("SLACK_WEBHOOK_URL não configurado")

        channel = _first_env(environ, "SLACK_CHANNEL", "slackChannel")
        if not channel:
            raise ConfigError("SLACK_CHANNEL não configurado")

        min_severity = _first_env(environ, "MIN_SEVERITY_LEVEL", "minSeverityLevel") or DEFAULT_MIN_SEVERITY

        raw_timeout = _first_env(environ, "REQUEST_TIMEOUT_SECONDS")
        try:
            request_timeout = float(raw_timeout) if raw_timeout else float(DEFAULT_REQUEST_TIMEOUT_SECONDS)
        except ValueError:
            raise ConfigError(f"REQUEST_TIMEOUT_SECONDS inválido: {raw_timeout}")
        if request_timeout <= 0:
            raise ConfigError(f"REQUEST_TIMEOUT_SECONDS deve ser positivo: {raw_timeout}")

        return cls(
            webhook_url=webhook_url,
            channel=channel,
            min_severity=min_severity,
            request_timeout=request_timeout,
        )
