import logging
from typing import Optional

from flask import Flask, request

from .config import ForwarderConfig
from .formatters import InvalidEventError
from .forwarder import forward_finding

logger = logging.getLogger(__name__)


def create_app(config: Optional[ForwarderConfig] = None):
    app = Flask(__name__)
    if config is None:
        config = ForwarderConfig.from_env()
    app.config['FORWARDER_CONFIG'] = config

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'guardduty-slack-notifier'}, 200

    @app.route('/finding', methods=['POST'])
    def finding():
        data = request.get_json(silent=True)
        if data is None:
            return {'status': 'invalid', 'error': 'corpo JSON ausente ou inválido'}, 400
        logger.debug(f"Received data: {data}")

        try:
            result = forward_finding(data, config)
        except InvalidEventError as exc:
            logger.warning(f"Evento inválido: {exc}")
            return {'status': 'invalid', 'error': str(exc)}, 400

        if not result.ok:
            return {'status': result.status, 'error': result.error}, 502
        return {'status': result.status}, 200

    return app
