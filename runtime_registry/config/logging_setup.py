"""Root logger configuration for runtime entrypoints."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_HANDLER_NAME = "runtime-registry"


def config_configure_logging(log_level: str) -> None:
    """Install one named stream handler on the root logger and apply the level.

    Repeated calls only update the level.

    Args:
        log_level: Standard logging level name.

    Returns:
        None: Configures the root logger as a side effect.

    Raises:
        ValueError: Raised when log_level is not a known level name.
    """

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if any(handler.get_name() == LOG_HANDLER_NAME for handler in root_logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
