"""
Call tracing decorator on top of loguru.

`@Logger.io` logs the arguments and the return value of the wrapped callable
at DEBUG level, indented by call depth so nested use cases read as a tree.
Works on plain functions, coroutines and generators (every yield is logged).
Exceptions are logged once, at the innermost decorated frame, then re-raised.
"""

from collections.abc import Awaitable, Generator
from functools import wraps
from inspect import iscoroutinefunction, isgeneratorfunction
import types
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.generator_wrapper import GeneratorWrapper
from src.platform.logging.loguru_io_config import (
    ExtraField,
    GeneratorMethod,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    fetch_layer_depth,
    get_chain_start_time,
    handle_yield,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    # Skip the wrapper frame and this class when loguru reports {function}:{line}
    depth = 2

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    @property
    def _bound(self) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth)

    # ============================== Rendering ==============================

    def render(self, data: Any) -> Any:
        if isinstance(data, dict):
            rendered: Any = {
                key: self.render(should_mask_keyword(key, value)) for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            rendered = type(data)(self.render(item) for item in data)
        else:
            rendered = mask_sensitive(data)
        return truncate_content(rendered) if self.truncate_content else rendered

    def log_args_kwargs_content(
        self, *args: Any, yield_method: Optional[GeneratorMethod] = None, **kwargs: Any
    ) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound.debug(
                f'{fetch_layer_depth()}{handle_yield(yield_method)}'
                f'args: {self.render(args)}, kwargs: {self.render(kwargs)}'
            )

    def log_return_content(
        self, return_value: Any, yield_method: Optional[GeneratorMethod] = None
    ) -> None:
        if settings.DEBUG:
            self._bound.debug(
                f'{fetch_layer_depth()}{handle_yield(yield_method)}'
                f'return: {self.render(return_value)}'
            )

    def log_exception(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            # Domain errors are expected outcomes, no traceback
            self._bound.error(f'{type(e).__name__}: {e}')
        else:
            self._bound.exception(f'{type(e).__name__}: {e}')

    def _failed(self, e: Exception) -> None:
        self.log_exception(e)
        if self.reraise:
            raise e

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    # ============================== Decorator ==============================

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self.log_args_kwargs_content(*args, **kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = await cast(Awaitable[Any], func(*args, **kwargs))
                    self.log_return_content(result)
                    return result
                except Exception as e:
                    self._failed(e)
                    return None
                finally:
                    reset_call_depth()

        elif isgeneratorfunction(func):

            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Optional[GeneratorWrapper]:
                try:
                    self.log_args_kwargs_content(*args, **kwargs)
                    gen = cast(Generator[Any, Any, Any], func(*args, **kwargs))
                    return GeneratorWrapper(gen, self)
                except Exception as e:
                    self._failed(e)
                    return None
                finally:
                    reset_call_depth()

        else:

            @wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self.log_args_kwargs_content(*args, **kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = func(*args, **kwargs)
                    self.log_return_content(result)
                    return result
                except Exception as e:
                    self._failed(e)
                    return None
                finally:
                    reset_call_depth()

        return cast(_F, self._hide_from_traceback(wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    """
    Usage:
        Logger.base.info('...')          plain loguru logger
        @Logger.io                       trace a callable
        @Logger.io(truncate_content=True)
    """

    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        tracer = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return tracer(func) if func else tracer
