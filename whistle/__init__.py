"""Relay de alertas (TradingView e similares) -> webhooks do Discord.

Este pacote contém:
- constants: variáveis de ambiente e constantes de apresentação
- errors: erros do relay (todos viram 404 para o cliente)
- webhooks: leitura do DISCORD_WEBHOOKS e resolução do path -> url
- formatters: montagem do embed do Discord a partir do alerta
- services: envio para o Discord
- controller: criação do Flask app e endpoints
"""
import logging

from .constants import LOG_LEVEL


def configure_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
