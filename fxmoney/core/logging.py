import logging
import sys

_HANDLER_NAME = "fxmoney-stdout"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure logging to output to stdout with proper formatting.

    Calling it again only updates the level; the stdout handler is added once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    if any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
        )
    )
    root_logger.addHandler(handler)

    # The OTLP exporter is chatty when no collector is listening
    for noisy in ("opentelemetry", "grpc"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
