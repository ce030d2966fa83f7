# backend/beautyshop/core/logging_config.py
"""
Configuración centralizada del logging.

Todos los módulos obtienen su logger con `logging.getLogger(__name__)`;
este módulo solo instala el handler raíz una vez, al arrancar la aplicación.
"""

import logging
import sys

_configured = False


def setup_logging(level: str = "INFO", fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s") -> None:
    """
    Configura el logger raíz con un único handler a stdout.

    Llamadas repetidas (por ejemplo, recargas del lifespan en tests)
    no duplican handlers.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    _configured = True
