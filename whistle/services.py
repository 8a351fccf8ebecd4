import logging
from typing import Dict

import requests

from .constants import DEBUG_MODE
from .errors import DispatchFailure

logger = logging.getLogger(__name__)


def send_discord_payload(url: str, payload: Dict) -> requests.Response:
    # Sem timeout explícito e sem retry; o status da resposta não é verificado
    try:
        resp = requests.post(url, json=payload)
    except requests.RequestException as exc:
        logger.error("Failed to send message to Discord: %r", exc)
        raise DispatchFailure(url, exc) from exc

    if DEBUG_MODE:
        logger.debug("Discord response: %s", resp.status_code)
        if resp.status_code != 204:
            logger.debug("Response content: %s", resp.text)
    logger.info("Message successfully sent to Discord.")
    return resp
