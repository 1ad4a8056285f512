import logging

from objpath import configure_logging, get_logger
from objpath.runtime.logging import LOGGER_NAME, _ObjPathRichConsoleHandler


def _rich_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, _ObjPathRichConsoleHandler)]


def test_configure_logging_is_idempotent() -> None:
    logger = get_logger()
    original_level = logger.level
    try:
        configure_logging("debug")
        configure_logging(logging.INFO)

        assert logger.name == LOGGER_NAME
        assert len(_rich_handlers(logger)) == 1
        assert logger.level == logging.INFO
    finally:
        for handler in _rich_handlers(logger):
            logger.removeHandler(handler)
        logger.setLevel(original_level)


def test_configure_logging_defaults_to_config_level(objpath_env) -> None:
    objpath_env.log_level = "ERROR"
    logger = get_logger()
    original_level = logger.level
    try:
        assert configure_logging() is logger
        assert logger.level == logging.ERROR
    finally:
        for handler in _rich_handlers(logger):
            logger.removeHandler(handler)
        logger.setLevel(original_level)
