import sys
from loguru import logger

LOG_FORMAT = "{time:MMMM D, YYYY - HH:mm:ss} | {level} | <level>{message}</level>"

def _stderr_sink(message):
    sys.stderr.write(message)

def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(_stderr_sink, format=LOG_FORMAT, level=level.upper())

configure_logging()
