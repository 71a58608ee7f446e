import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "info") -> None:
    """
    Configura el logger raíz con un único handler a stderr.

    Llamar una sola vez, antes de arrancar el servidor.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Evita handlers duplicados si se llama de nuevo (p. ej. con --reload).
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    logging.captureWarnings(True)
