"""
Loguru sinks and shared logging state.

- Console sink always; hourly rotated file sink under LOG_DIR when DEBUG
- Standard `logging` records (fastapi, starlette, granian) are routed into loguru
- TEST_LOG_DIR redirects the file sink while running the test suite
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING
import zoneinfo

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {'password', 'token'}
DEPTH_LINE = '| '

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records to loguru, keeping the original caller."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    log_dir = os.environ.get('TEST_LOG_DIR', str(LOG_DIR))
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    hour = datetime.now(zoneinfo.ZoneInfo(settings.TIMEZONE)).strftime('%Y-%m-%d_%H')
    return f'{log_dir}/{prefix}{hour}.log'


def _configure_sinks(target: 'LoguruLogger') -> None:
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    target.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    if settings.DEBUG:
        target.add(
            _log_file_path(),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())
_configure_sinks(custom_logger)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
