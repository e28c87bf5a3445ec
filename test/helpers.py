from guardduty_notifier.config import ForwarderConfig

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def make_event(severity=5.0, finding_type="UnauthorizedAccess:EC2/SSHBruteForce", **detail_overrides):
    detail = {
        "type": finding_type,
        "description": "EC2 instance i-99999999 is being probed.",
        "updatedAt": "2017-10-31T23:16:23.824Z",
        "accountId": "123456789012",
        "region": "us-east-1",
        "id": "96b01e4ad2ba45f1a5b8ee8b0a4e6d7c",
        "severity": severity,
    }
    detail.update(detail_overrides)
    return {
        "version": "0",
        "detail-type": "GuardDuty Finding",
        "source": "aws.guardduty",
        "region": "us-east-1",
        "detail": detail,
    }


def make_config(min_severity="HIGH", **overrides):
    values = {
        "webhook_url": WEBHOOK_URL,
        "channel": "#security-alerts",
        "min_severity": min_severity,
        "request_timeout": 5,
    }
    values.update(overrides)
    return ForwarderConfig(**values)


class FakeResponse:
    def __init__(self, status_code, reason="", text=""):
        self.status_code = status_code
        self.reason = reason
        self.text = text
