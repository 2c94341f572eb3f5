"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomotodo.models import InvalidTarget, PersistenceError, ValidationError
from pomotodo.services.config_service import get_config_service
from pomotodo.ui.formatters import format_error
from pomotodo.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
    get_exit_code_name,
)
from pomotodo.utils.logger import get_logger
from pomotodo.utils.uuid_utils import TaskNotFoundError

# Checked in order; the first matching type decides the exit code
_EXIT_CODES: tuple[tuple[type[Exception], int], ...] = (
    (ValidationError, ERROR_INVALID_ARGS),
    (InvalidTarget, ERROR_INVALID_ARGS),
    (TaskNotFoundError, ERROR_NOT_FOUND),
    (PersistenceError, ERROR_STORAGE),
)


def command_wrapper(func: Callable) -> Callable:
    """Log the command and turn known errors into messages and exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(get_config_service().config.logging.level)
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
            return result

        except typer.Exit:
            raise

        except tuple(exc for exc, _ in _EXIT_CODES) as e:
            elapsed = time.monotonic() - start
            code = next(code for exc, code in _EXIT_CODES if isinstance(e, exc))
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s", cmd, elapsed, get_exit_code_name(code), e
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
