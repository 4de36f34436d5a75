"""
Configuração de logging da aplicação.

Os módulos usam apenas `logging.getLogger(__name__)`; somente os
pontos de entrada (CLI e API) chamam `setup_logging`.
"""

from __future__ import annotations

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Instala um único handler em stdout no logger raiz."""
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.handlers.clear()
    root.addHandler(handler)

    # Matplotlib é verboso em DEBUG (font manager)
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
