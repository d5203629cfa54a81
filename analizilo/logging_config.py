import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    Reports progress through a long text in the log file, with a running
    count of invalid words. Used alongside tqdm, which only draws on the
    console.
    """
    def __init__(self, total, desc="Analyzing", logger=None, step_percent=10):
        self.total = total
        self.current = 0
        self.invalid = 0
        self.desc = desc
        self.step_percent = step_percent
        self.logger = logger or logging.getLogger(__name__)
        self.start_time = datetime.now()
        self.last_log_percent = -1

    def update(self, n=1, invalid=0):
        """Advance by n lines, of which `invalid` words failed analysis."""
        self.current += n
        self.invalid += invalid
        percent = int((self.current / self.total) * 100) if self.total > 0 else 100

        if percent - self.last_log_percent < self.step_percent and self.current < self.total:
            return

        elapsed = (datetime.now() - self.start_time).total_seconds()
        rate = self.current / elapsed if elapsed > 0 else 0
        msg = f"{self.desc}: {self.current}/{self.total} ({percent}%), {self.invalid} invalid"
        if rate > 0 and self.current < self.total:
            msg += f" [ETA: {int((self.total - self.current) / rate)}s]"
        self.logger.info(msg)
        self.last_log_percent = percent

    def close(self):
        """Mark progress as complete."""
        if self.current < self.total:
            self.update(self.total - self.current)


def setup_logging(log_file='analizilo.log', level=logging.WARNING, debug=False):
    """
    Set up logging for the command-line tool.

    Results are printed on stdout, so console log messages go to stderr.

    Args:
        log_file: Path to the log file, or None for console logging only.
        level: Logging level (default: WARNING). Use DEBUG for verbose output.
        debug: If True, enables DEBUG level with extra context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    # Enhanced format with more context for debugging
    if debug:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'
    formatter = logging.Formatter(format_string)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.debug("=" * 80)
    logging.debug(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logging.debug("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
    """
    logger = logging.getLogger("analizilo")
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
