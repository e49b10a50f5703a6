import atexit
import logging

from rich.logging import RichHandler

from .util import console

logger = logging.getLogger(__name__)


def init_logging(verbose: bool) -> None:
    handler = RichHandler(console=console)  # show_time=False
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,  # Override any previous logging configuration
    )

    def cleanup_logging():
        logging.getLogger().removeHandler(handler)
        logging.shutdown()

    atexit.register(cleanup_logging)
