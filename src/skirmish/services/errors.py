"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created from definitions."""


class EncounterError(Exception):
    """Raised when an encounter is missing an actor it needs to advance."""
