# gmath/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("gmath")

logger = init_logger()
