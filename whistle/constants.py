import os

# Configurações globais de ambiente
APP_PORT = int(os.getenv("PORT", "8080"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG_MODE else "INFO").upper()

# Mapa path -> webhook do Discord (JSON url-encoded). Lido a cada requisição, nunca em cache.
DISCORD_WEBHOOKS_ENV = "DISCORD_WEBHOOKS"
DISCORD_WEBHOOKS_DEFAULT = "[]"

# Apresentação das mensagens (embed do Discord)
SOURCE_NAME = "Whistle"
AUTHOR_URL = "https://github.com/coinchimp/whistle"
AUTHOR_ICON_URL = "https://raw.githubusercontent.com/coinchimp/whistle/main/assets/images/whistle.png"

ALERT_FIELDS = ("exchange", "ticker", "close", "open", "volume", "event", "interval")

EMBED_COLORS = {
    "down": 0xFF0000,  # vermelho
    "up": 0x00FF00,  # verde
    "text": 0xFFC0CB,  # rosa
}

# Respostas HTTP
HEALTHY_TEXT = "Healthy"
SENT_TEXT = "Content sent to Discord"
NOT_FOUND_TEXT = "Not found"
