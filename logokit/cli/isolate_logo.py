import sys
import logging

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from . import configure_logging
from ..pipeline.logo_isolator import isolate_logo_file, log_isolation_results, SOURCE_PATHS, OUTPUT_PATH

logger = logging.getLogger(__name__)


def main() -> int:
    """
    Strip the white background from the source logo and write the
    transparent master. Configured entirely from the environment.
    """
    configure_logging()
    try:
        result = isolate_logo_file(SOURCE_PATHS, OUTPUT_PATH)
    except (FileNotFoundError, TimeoutError, ValueError, OSError) as err:
        logger.error(f"Logo isolation failed: {err}")
        return 1

    log_isolation_results(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
