import os
import logging


def configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    # Runs before any pipeline import so all modules share the same config.
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )
