"""Pacote do encaminhador de findings do GuardDuty -> Slack.

Este pacote contém:
- constants: valores fixos (regra de supressão, níveis de severidade, ícone) e env do processo
- config: configuração imutável do encaminhador (webhook, canal, severidade mínima)
- utils: utilitários de formatação e helpers
- detection: supressão por tipo e classificação de severidade
- formatters: extração do finding e montagem do payload do Slack
- services: integração com serviços externos (Slack)
- forwarder: operação de encaminhamento de um evento
- handler: ponto de entrada AWS Lambda
- controller: criação do Flask app e endpoints
"""
