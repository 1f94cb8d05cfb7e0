# objscene/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета. Диагностика разбора идёт сюда,
# а не в возвращаемое значение парсеров.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "objscene"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)


logger = init_logger()


def set_log_level(level) -> None:
    """Принимает int (logging.DEBUG) или имя уровня ("DEBUG", "error"...)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logger.warning(f"[Logger] Unknown log level '{level}', keeping {logging.getLevelName(logger.level)}")
            return
        level = resolved
    logger.setLevel(level)
