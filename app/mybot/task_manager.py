# -*- coding: utf-8 -*-
"""
Centralized task management system for non-blocking bot operations
"""
import asyncio
import functools
from typing import Set, Callable

from loguru import logger


# Global task registry for all bot operations
_active_tasks: Set[asyncio.Task] = set()


def non_blocking_handler(handler_name: str = "unknown"):
    """
    Decorator to make any bot handler non-blocking by running it as a background task.

    Args:
        handler_name: Name of the handler for logging purposes

    Usage:
        @non_blocking_handler("handle_channel_post")
        async def handle_channel_post(update, context):
            # This will run in background without blocking other handlers
            pass
    """

    def decorator(handler_func: Callable):
        @functools.wraps(handler_func)
        async def wrapper(update, context):
            task = asyncio.create_task(
                _execute_handler_task(handler_func, update, context, handler_name)
            )

            # Add task to set to prevent garbage collection
            _active_tasks.add(task)
            task.add_done_callback(_active_tasks.discard)

            logger.debug(
                f"Started non-blocking {handler_name} task (Active tasks: {len(_active_tasks)})"
            )

        return wrapper

    return decorator


async def _execute_handler_task(handler_func: Callable, update, context, handler_name: str):
    """Execute handler function as a background task, logging anything that escapes it"""
    try:
        await handler_func(update, context)
        logger.debug(f"Completed {handler_name} task")
    except Exception as e:
        logger.exception(f"Error in {handler_name} handler: {e}")


async def wait_for_all_tasks(timeout: float = 30.0) -> bool:
    """
    Wait for all active tasks to complete, with timeout.
    Useful for graceful shutdown.

    Returns:
        True if all tasks completed, False if timeout occurred
    """
    if not _active_tasks:
        return True

    logger.info(f"Waiting for {len(_active_tasks)} active tasks to complete...")

    try:
        await asyncio.wait_for(
            asyncio.gather(*_active_tasks, return_exceptions=True), timeout=timeout
        )
        logger.info("All tasks completed successfully")
        return True

    except asyncio.TimeoutError:
        logger.warning(
            f"Timeout waiting for tasks to complete, {len(_active_tasks)} tasks still running"
        )
        return False
