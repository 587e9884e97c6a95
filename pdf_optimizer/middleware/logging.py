import functools
import os
import threading
from typing import Any, Callable

import psutil
from aws_lambda_powertools.logging import Logger
from pydantic import BaseModel

logger = Logger(service="pdf-optimizer")


def _system_info(scratch_dir: str) -> dict:
    vm = psutil.virtual_memory()
    info = {
        "cpu_cores": os.cpu_count(),
        "memory_available_mb": vm.available // (1024 * 1024),
        "memory_percent_used": vm.percent,
        "active_threads": threading.active_count(),
    }
    if os.path.isdir(scratch_dir):
        info["scratch_free_mb"] = psutil.disk_usage(scratch_dir).free // (1024 * 1024)
    return info


def logging_middleware(scratch_dir: str = ".") -> Callable:
    """Decorator that wraps a job entry point with structured run logging."""

    def decorator(job: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(job)
        def wrapper(*args, **kwargs):
            logger.info(
                "System details at start",
                extra={"system_info": _system_info(scratch_dir)},
            )
            try:
                result = job(*args, **kwargs)
            except Exception:
                logger.exception("Error running job")
                # Re-raise so the caller decides the exit status
                raise

            logged = result.model_dump() if isinstance(result, BaseModel) else result
            logger.info("Job executed successfully", extra={"result": logged})
            logger.info(
                "System details at end",
                extra={"system_info": _system_info(scratch_dir)},
            )
            return result

        return wrapper

    return decorator
