#!/usr/bin/env python3
import json
import unittest
from unittest.mock import patch

import requests

from guardduty_notifier.services import DeliveryOutcome, classify_status, send_slack_payload

from helpers import WEBHOOK_URL, FakeResponse


class TestClassifyStatus(unittest.TestCase):
    def test_faixas(self):
        self.assertIs(classify_status(200), DeliveryOutcome.SUCCESS)
        self.assertIs(classify_status(302), DeliveryOutcome.SUCCESS)
        self.assertIs(classify_status(399), DeliveryOutcome.SUCCESS)
        self.assertIs(classify_status(400), DeliveryOutcome.CLIENT_ERROR)
        self.assertIs(classify_status(499), DeliveryOutcome.CLIENT_ERROR)
        self.assertIs(classify_status(500), DeliveryOutcome.SERVER_ERROR)
        self.assertIs(classify_status(503), DeliveryOutcome.SERVER_ERROR)


class TestSendSlackPayload(unittest.TestCase):
    payload = {"channel": "#sec", "text": "", "attachments": [{"title": "Acesso à instância"}]}

    @patch('guardduty_notifier.services.requests.post')
    def test_post_com_headers(self, mock_post):
        mock_post.return_value = FakeResponse(200, "OK", "ok")

        result = send_slack_payload(WEBHOOK_URL, self.payload, timeout=3)

        self.assertTrue(result.ok)
        self.assertIs(result.outcome, DeliveryOutcome.SUCCESS)
        mock_post.assert_called_once()
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], WEBHOOK_URL)
        self.assertEqual(kwargs['timeout'], 3)
        body = kwargs['data']
        self.assertIsInstance(body, bytes)
        self.assertEqual(kwargs['headers']['Content-Type'], 'application/json')
        # Content-Length em bytes, não em caracteres
        self.assertEqual(kwargs['headers']['Content-Length'], str(len(body)))
        self.assertEqual(json.loads(body.decode('utf-8')), self.payload)

    @patch('guardduty_notifier.services.requests.post')
    def test_erro_cliente_nao_fatal(self, mock_post):
        mock_post.return_value = FakeResponse(403, "Forbidden", "invalid_token")

        with self.assertLogs('guardduty_notifier.services', level='ERROR') as logs:
            result = send_slack_payload(WEBHOOK_URL, self.payload, timeout=3)

        self.assertTrue(result.ok)
        self.assertIs(result.outcome, DeliveryOutcome.CLIENT_ERROR)
        self.assertEqual(result.status_code, 403)
        self.assertIn('403 - Forbidden', logs.output[0])

    @patch('guardduty_notifier.services.requests.post')
    def test_erro_servidor_fatal(self, mock_post):
        mock_post.return_value = FakeResponse(503, "Service Unavailable")

        result = send_slack_payload(WEBHOOK_URL, self.payload, timeout=3)

        self.assertFalse(result.ok)
        self.assertIs(result.outcome, DeliveryOutcome.SERVER_ERROR)
        self.assertEqual(result.reason, "Service Unavailable")

    @patch('guardduty_notifier.services.requests.post')
    def test_falha_de_rede(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("Name or service not known")

        result = send_slack_payload(WEBHOOK_URL, self.payload, timeout=3)

        self.assertFalse(result.ok)
        self.assertIs(result.outcome, DeliveryOutcome.TRANSPORT_ERROR)
        self.assertIsNone(result.status_code)
        self.assertIn("Name or service not known", result.error)

    @patch('guardduty_notifier.services.requests.post')
    def test_timeout_e_falha_de_rede(self, mock_post):
        mock_post.side_effect = requests.Timeout("read timed out")

        result = send_slack_payload(WEBHOOK_URL, self.payload, timeout=3)

        self.assertIs(result.outcome, DeliveryOutcome.TRANSPORT_ERROR)


if __name__ == '__main__':
    unittest.main()
