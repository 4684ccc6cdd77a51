import sys
import logging

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from . import configure_logging
from ..pipeline.asset_generator import generate_assets, log_asset_results, SOURCE_FILE, OUTPUT_DIR, COPY_DIR

logger = logging.getLogger(__name__)


def main() -> int:
    """Build the logo kit from the transparent master."""
    configure_logging()
    try:
        report = generate_assets(SOURCE_FILE, OUTPUT_DIR, COPY_DIR)
    except (TimeoutError, ValueError, OSError) as err:
        logger.error(f"Asset generation failed: {err}")
        return 1

    log_asset_results(report, OUTPUT_DIR)
    return 0


if __name__ == "__main__":
    sys.exit(main())
