import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(*, level: str = "INFO", log_dir: str | Path = "logs") -> None:
    """Route loguru to stdout at `level` and to a daily DEBUG file in `log_dir`.

    The file sink keeps every fetch and skip, so a silent cycle can be
    traced after the fact.
    """
    logger.remove()
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)
    logger.add(
        Path(log_dir) / "solbot_{time:YYYY-MM-DD}.log",
        rotation="50 MB",
        retention="3 days",
        compression="gz",
        level="DEBUG",
    )
