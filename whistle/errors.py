"""Erros do relay. Todos chegam ao cliente como o mesmo 404 genérico."""


class WhistleError(Exception):
    """Base para os erros do pacote."""


class ConfigParseError(WhistleError):
    """DISCORD_WEBHOOKS malformado. Tratado localmente como lista vazia."""

    def __init__(self, text: str, reason: str):
        super().__init__(f"Failed to parse DISCORD_WEBHOOKS: {reason}")
        self.text = text
        self.reason = reason


class NoMatchingWebhook(WhistleError):
    def __init__(self, path: str):
        super().__init__(f"No valid webhook URL found for path: {path}")
        self.path = path


class DispatchFailure(WhistleError):
    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to send message to Discord: {cause!r}")
        self.url = url
        self.cause = cause
