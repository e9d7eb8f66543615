import logging
import os


def configure_logging():
    level_name = os.getenv("ESCROW_UI_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger("reportlab").setLevel(logging.WARNING)
    logging.getLogger("watchdog").setLevel(logging.WARNING)
