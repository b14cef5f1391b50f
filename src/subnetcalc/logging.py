import sys, logging
from contextlib import ExitStack, contextmanager
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "subnetcalc"

class HeldStreamHandler(logging.StreamHandler):
    """
    stderr handler that can be put on hold while the full-screen UI owns the
    terminal; held records are written once the hold is released.
    """
    def __init__(self, stream=None):
        super().__init__(stream=stream if stream is not None else sys.stderr)
        self.held = False
        self._pending: list[logging.LogRecord] = []

    def emit(self, record):
        if self.held:
            self._pending.append(record)
            return
        super().emit(record)

    @contextmanager
    def hold(self):
        self.held = True
        try:
            yield self
        finally:
            self.held = False
            pending, self._pending = self._pending, []
            for record in pending:
                super().emit(record)

def setup_logging(*, level: str="WARNING", quiet: bool=False, log_file: str|None=None, stream=None):
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level.upper())
    for h in list(log.handlers):
        log.removeHandler(h)
        h.close()

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

    if not quiet:
        h = HeldStreamHandler(stream=stream)
        h.setLevel(level.upper())
        h.setFormatter(fmt)
        log.addHandler(h)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setLevel(level.upper())
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log

def get_logger():
    return logging.getLogger(LOGGER_NAME)

@contextmanager
def hold_console_logging():
    """Hold every HeldStreamHandler on the app logger for the duration of the block."""
    with ExitStack() as stack:
        for h in get_logger().handlers:
            if isinstance(h, HeldStreamHandler):
                stack.enter_context(h.hold())
        yield
