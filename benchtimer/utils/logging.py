import logging
import sys
from typing import TextIO


LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def setup_logger(
    name: str = "benchtimer",
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Настраивает логгер таймеров с выводом в отдельный поток.

    Результаты замеров печатаются в stdout, поэтому по умолчанию
    сообщения логгера идут в sys.stderr. Повторный вызов заменяет
    ранее добавленный обработчик новым.

    :param name: имя логгера
    :param level: минимальный уровень логирования
    :param stream: поток для сообщений (None — sys.stderr)
    :return: настроенный экземпляр :class:`logging.Logger`
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    target = stream if stream is not None else sys.stderr

    for old in [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]:
        logger.removeHandler(old)

    handler = logging.StreamHandler(target)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)

    logger.propagate = False
    return logger


def format_timer_prefix(label: str) -> str:
    """Текстовый префикс для логов по названию таймера."""
    return f"[timer={label}]"
