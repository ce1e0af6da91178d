"""
Configuração de logging do Painel DRE.
"""

import logging

from painel_dre.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configura o logger raiz do pacote com saída no console (idempotente)."""
    root = logging.getLogger("painel_dre")
    root.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)

    return root
