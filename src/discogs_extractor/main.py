"""
Discogs Metadata Extractor
Main entry point for the application.
"""

import sys
from pathlib import Path

try:
    _package = __package__
except NameError:
    _package = None

if not _package:
    _script_path = Path(__file__).resolve()
    src_path = _script_path.parent.parent
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))
    from discogs_extractor.core import setup_logging
    from discogs_extractor.ui.cli import ExtractorCLI
else:
    from .core import setup_logging
    from .ui.cli import ExtractorCLI

logger = setup_logging()


def main():
    """Main entry point."""
    logger.debug("Starting Discogs Metadata Extractor")
    try:
        cli = ExtractorCLI()
        sys.exit(cli.run())
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    main()
