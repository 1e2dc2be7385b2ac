"""Exceptions du canvas builder."""


class CanvasError(Exception):
    """Erreur de base du canvas builder."""
    pass


class UnknownElementTypeError(CanvasError, ValueError):
    """Type d'élément hors des 7 variantes."""
    pass


class UnknownFieldError(CanvasError, ValueError):
    """Champ content/styles non reconnu par la variante ciblée."""

    def __init__(self, element_type: str, fields: list[str]):
        self.element_type = element_type
        self.fields = fields
        super().__init__(f"{element_type} ne reconnaît pas : {', '.join(fields)}")


class InvalidDragTransition(CanvasError, RuntimeError):
    """Événement de drag reçu dans un état qui ne l'accepte pas."""
    pass
