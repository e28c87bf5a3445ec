import os

# Configurações globais de ambiente do processo
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# Findings deste tipo nunca são notificados (regra fixa, não configurável)
SUPPRESSED_FINDING_TYPE = "Recon:EC2/PortProbeUnprotectedPort"

# Valores aceitos para MIN_SEVERITY_LEVEL; qualquer outro valor equivale a HIGH
MIN_SEVERITY_LOW = "LOW"
MIN_SEVERITY_MEDIUM = "MEDIUM"
MIN_SEVERITY_HIGH = "HIGH"
DEFAULT_MIN_SEVERITY = MIN_SEVERITY_HIGH

DEFAULT_REQUEST_TIMEOUT_SECONDS = 10

# Faixas de severidade do GuardDuty (score 0-10)
SEVERITY_LEVELS = {
    "low": {
        "threshold_max": 4.0,
        "label": "Low",
        "color": "#e2d43b",
        "notify_on": {MIN_SEVERITY_LOW},
    },
    "medium": {
        "threshold_min": 4.0,
        "threshold_max": 7.0,
        "label": "Medium",
        "color": "#ff8c00",
        "notify_on": {MIN_SEVERITY_LOW, MIN_SEVERITY_MEDIUM},
    },
    "high": {
        "threshold_min": 7.0,
        "label": "High",
        "color": "#ad0614",
        "notify_on": None,  # sempre notifica
    },
    "default": {
        "label": "",
        "color": "#7CD197",
        "notify_on": set(),  # nunca notifica
    },
}

# Mensagem do Slack
SLACK_USERNAME = "GuardDuty"
SLACK_ICON_URL = "https://raw.githubusercontent.com/aws-samples/amazon-guardduty-to-slack/master/images/gd_logo.png"
GUARDDUTY_CONSOLE_URL = "https://console.aws.amazon.com/guardduty"
