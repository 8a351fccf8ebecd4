import json
from typing import Any, Dict

from .constants import ALERT_FIELDS, AUTHOR_ICON_URL, AUTHOR_URL, EMBED_COLORS, SOURCE_NAME


def render_value(value: Any) -> str:
    # JSON compacto: strings mantêm as aspas, null/true/false em minúsculo
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)


def extract_alert_fields(data: Dict) -> Dict[str, str]:
    fields = {}
    for name in ALERT_FIELDS:
        value = data.get(name)
        fields[name] = value if isinstance(value, str) else ""
    return fields


def pick_color(close: str, open_: str) -> int:
    # Comparação de strings (lexicográfica), não numérica: "100" < "99"
    if close < open_:
        return EMBED_COLORS["down"]
    return EMBED_COLORS["up"]


def build_embed(title: str, description: str, color: int) -> Dict:
    return {
        "author": {
            "name": title,
            "url": AUTHOR_URL,
            "icon_url": AUTHOR_ICON_URL,
        },
        "description": description,
        "color": color,
    }


def format_alert_payload(data: Any) -> Dict:
    """
    Converte o alerta recebido no payload de embeds do Discord.

    Objetos JSON viram um resumo do candle (ticker/evento/exchange com Open,
    Close, Interval e Volume). Qualquer outro valor vira uma notificação de
    texto com o JSON original na descrição.
    """
    if isinstance(data, dict):
        f = extract_alert_fields(data)
        title = f"{SOURCE_NAME}: {f['ticker']} {f['event']} at {f['exchange']}"
        description = (
            f"Open: {f['open']}\n"
            f"Close: {f['close']}\n"
            f"Interval: {f['interval']}\n"
            f"Volume: {f['volume']}\n"
        )
        embed = build_embed(title, description, pick_color(f['close'], f['open']))
    else:
        embed = build_embed(
            f"{SOURCE_NAME}: Text Notification",
            f"Event: {render_value(data)}",
            EMBED_COLORS["text"],
        )
    return {"embeds": [embed]}
