import logging

from rich.logging import RichHandler

from config import Settings


def setup_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
