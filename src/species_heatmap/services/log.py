"""Logger lookup that works inside and outside Prefect runs."""

from __future__ import annotations

import logging

from prefect.exceptions import MissingContextError
from prefect.logging import get_logger, get_run_logger


def get_log(name: str) -> logging.Logger | logging.LoggerAdapter[logging.Logger]:
    """
    Return the current flow/task run logger, or a named Prefect logger.

    Run loggers attach messages to the run in the Prefect UI; outside a run
    (plain function calls, tests) there is no run context to attach to.
    """
    try:
        return get_run_logger()
    except MissingContextError:
        return get_logger(name)
