class PainelDREError(Exception):
    """Base exception for the DRE dashboard."""


class DataLoadError(PainelDREError):
    """Raised when an exported sales/expenses table cannot be read."""
