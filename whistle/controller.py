import json
import logging
from urllib.parse import urlsplit

from flask import Flask, abort, request
from werkzeug.exceptions import BadRequest, HTTPException

from .constants import HEALTHY_TEXT, NOT_FOUND_TEXT, SENT_TEXT
from .errors import WhistleError
from .formatters import format_alert_payload
from .services import send_discord_payload
from .webhooks import load_webhooks, resolve_webhook_url

logger = logging.getLogger(__name__)

TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


def _reject_constant(name):
    raise ValueError(f"invalid JSON constant: {name}")


def _read_json_body():
    # Content-Type ausente é aceito; se presente, precisa ser JSON
    if request.mimetype and not request.is_json:
        abort(415)
    # Qualquer JSON vale, inclusive null. NaN/Infinity não são JSON.
    try:
        return json.loads(request.get_data(cache=False), parse_constant=_reject_constant)
    except ValueError as exc:
        raise BadRequest(f"Invalid JSON body: {exc}") from exc


def _raw_path_segment(path):
    """
    Segmento como veio na URL, sem o percent-decoding do Werkzeug
    (/webhook/a%20b procura 'a%20b', não 'a b').
    """
    raw_uri = request.environ.get('RAW_URI') or request.environ.get('REQUEST_URI')
    if not raw_uri:
        return path
    parts = urlsplit(raw_uri).path.split('/')
    if len(parts) == 3 and parts[1] == 'webhook':
        return parts[2]
    return path


def create_app():
    app = Flask(__name__)

    # Sem OPTIONS/HEAD automáticos: só GET / e POST /webhook/<path> respondem
    @app.route('/', methods=['GET'], provide_automatic_options=False)
    def health():
        if request.method == 'HEAD':
            abort(405)
        return HEALTHY_TEXT, 200, TEXT_HEADERS

    @app.route('/webhook/<path>', methods=['POST'], provide_automatic_options=False)
    def webhook(path):
        data = _read_json_body()

        webhooks = load_webhooks()
        url = resolve_webhook_url(_raw_path_segment(path), webhooks)
        logger.info("Using webhook URL: %s", url)
        logger.info("Received data: %s", data)

        send_discord_payload(url, format_alert_payload(data))
        return SENT_TEXT, 200, TEXT_HEADERS

    # Qualquer falha (rota inexistente, corpo inválido, webhook não encontrado,
    # erro de envio) vira o mesmo 404 para o cliente
    @app.errorhandler(WhistleError)
    def handle_whistle_error(err):
        logger.info("Handling rejection: %r", err)
        return NOT_FOUND_TEXT, 404, TEXT_HEADERS

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        logger.info("Handling rejection: %r", err)
        return NOT_FOUND_TEXT, 404, TEXT_HEADERS

    return app
