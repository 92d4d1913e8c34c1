import logging
import sys

from romanji.config import ROMANJI_LOG_LEVEL

logger = logging.getLogger("romanji")
logger.setLevel(getattr(logging, ROMANJI_LOG_LEVEL, logging.INFO))
logger.propagate = False

stdout_handler = logging.StreamHandler(sys.stdout)
stderr_handler = logging.StreamHandler(sys.stderr)

stdout_handler.setLevel(logging.DEBUG)    # everything below WARNING
stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

logger.addHandler(stdout_handler)
logger.addHandler(stderr_handler)
