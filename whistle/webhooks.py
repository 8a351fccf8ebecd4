import json
import logging
import os
from typing import Any, Optional
from urllib.parse import unquote

from .constants import DISCORD_WEBHOOKS_DEFAULT, DISCORD_WEBHOOKS_ENV
from .errors import ConfigParseError, NoMatchingWebhook

logger = logging.getLogger(__name__)


def _decode(encoded: str) -> str:
    try:
        return unquote(encoded, errors='strict')
    except UnicodeDecodeError:
        # Sequência %XX que não forma UTF-8 válido
        return DISCORD_WEBHOOKS_DEFAULT


def _parse(decoded: str) -> Any:
    try:
        return json.loads(decoded)
    except ValueError as exc:
        raise ConfigParseError(decoded, str(exc)) from exc


def load_webhooks(raw: Optional[str] = None) -> Any:
    """
    Carrega o mapa de webhooks a partir de DISCORD_WEBHOOKS (JSON url-encoded).
    Relido a cada chamada. Nunca falha: configuração inválida vira lista vazia.
    """
    encoded = raw if raw is not None else os.getenv(DISCORD_WEBHOOKS_ENV, DISCORD_WEBHOOKS_DEFAULT)
    logger.info("DISCORD_WEBHOOKS (encoded): %s", encoded)

    decoded = _decode(encoded)
    logger.info("DISCORD_WEBHOOKS (decoded): %s", decoded)

    try:
        webhooks = _parse(decoded)
    except ConfigParseError as exc:
        logger.error(str(exc))
        logger.error("Decoded DISCORD_WEBHOOKS value: %s", exc.text)
        webhooks = []

    logger.info("Parsed webhooks: %r", webhooks)
    return webhooks


def resolve_webhook_url(path: str, webhooks: Any) -> str:
    """
    Retorna a url da primeira entrada cujo 'path' é igual a `path`.
    Se essa entrada não tiver 'url' string, não procura duplicatas posteriores.
    """
    if isinstance(webhooks, list):
        for entry in webhooks:
            if isinstance(entry, dict) and entry.get('path') == path:
                url = entry.get('url')
                if isinstance(url, str):
                    return url
                break
    logger.error("No valid webhook URL found for path: %s", path)
    raise NoMatchingWebhook(path)
