"""Erreurs métier des pages.

Chaque erreur porte le code HTTP et le message renvoyés au client dans
l'enveloppe `{"success": false, "error": ...}`.
"""


class PageError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        return self.message


class NotFound(PageError):
    status_code = 404
    default_message = "Page not found"


class Conflict(PageError):
    status_code = 409
    default_message = "A page with this slug already exists"


class ValidationError(PageError):
    status_code = 400
    default_message = "invalid payload"

    @property
    def public_message(self) -> str:
        return f"Validation failed: {self.message}"


class MalformedIdentifier(PageError):
    status_code = 400
    default_message = "Invalid UUID format"


class InternalError(PageError):
    """Panne stockage / transport : le détail reste dans les logs"""
    status_code = 500
    default_message = "Internal server error"

    @property
    def public_message(self) -> str:
        return self.default_message
