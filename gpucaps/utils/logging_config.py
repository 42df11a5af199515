import logging

from gpucaps.config.settings import get_log_level


class ColoredFormatter(logging.Formatter):
    """Colors the level name of each record for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def format(self, record):
        # Other handlers must still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname:<8}{self.COLORS['RESET']}"
        else:
            record.levelname = f"{record.levelname:<8}"

        return logging.Formatter(self.LOG_FORMAT).format(record)


def get_logger(name: str = 'gpucaps', level: int = logging.INFO) -> logging.Logger:
    """Returns the named logger with a single colored stream handler."""
    _logger = logging.getLogger(name)
    if not _logger.handlers:
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(ColoredFormatter())
        _logger.addHandler(log_handler)
        _logger.propagate = False
    _logger.setLevel(level)
    return _logger


logger = get_logger(level=get_log_level())
