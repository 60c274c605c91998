import logging
import time
from datetime import timedelta

# level 21 sits between INFO and WARNING, registered at import so .progress() is always available
PROGRESS_LEVELV_NUM = 21
logging.PROGRESS = PROGRESS_LEVELV_NUM
logging.addLevelName(PROGRESS_LEVELV_NUM, "PROGRESS")


def progress(self, message, *args, **kws):
    if self.isEnabledFor(PROGRESS_LEVELV_NUM):
        self._log(PROGRESS_LEVELV_NUM, message, args, **kws)


logging.Logger.progress = progress


class DefaultFormatter(logging.Formatter):
    """Prefixes every record with the time elapsed since the formatter was created.

    Parameters
    ----------

    use_ansi : bool, default True
        Color PROGRESS, WARNING, ERROR and CRITICAL records with ANSI escape codes.
    """

    template = "%(levelname)s: %(message)s"
    colors = {
        PROGRESS_LEVELV_NUM: "\x1b[32;20m",
        logging.WARNING: "\x1b[33;20m",
        logging.ERROR: "\x1b[31;20m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    reset = "\x1b[0m"

    def __init__(self, use_ansi: bool = True):
        super().__init__(self.template)
        self.start_time = time.time()
        self.use_ansi = use_ansi

    def format(self, record: logging.LogRecord):
        elapsed = timedelta(seconds=record.created - self.start_time)
        message = super().format(record)

        color = self.colors.get(record.levelno) if self.use_ansi else None
        if color:
            message = f"{color}{message}{self.reset}"

        return f"{elapsed} {message}"


def init_logging(log_level: int = logging.INFO, use_ansi: bool = True):
    """Replace the handlers of the root logger by a single console handler.

    Parameters
    ----------

    log_level : int, default logging.INFO
        Level of the root logger and the console handler.

    use_ansi : bool, default True
        Whether to color the console output.
    """
    logger = logging.getLogger()
    logger.handlers = []
    logger.setLevel(log_level)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(DefaultFormatter(use_ansi=use_ansi))
    logger.addHandler(handler)
