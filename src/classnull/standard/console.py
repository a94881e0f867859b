#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jan 22 09:00:00 2025
@author: ike
"""


# 1. Standard library imports
from datetime import datetime


LEVELS = (
    "debug", "info", "notice", "warning",
    "error", "critical", "alert", "emergency")


def current_date_time(
):
    """Get current date and time.

    Returns
    -------
    curr_date : str
        Current date in YYYY-MM-DD format.
    curr_time : str
        Current time in hh:mm:ss format.
    """
    now = datetime.now()
    return now.strftime("%Y-%m-%d"), now.strftime("%H:%M:%S")


def level_rank(
        level: str
):
    """Get severity rank of a log level.

    Parameters
    ----------
    level : str
        Log level name, case-insensitive.

    Returns
    -------
    int
        Position of `level` in LEVELS.

    Raises
    ------
    ValueError
        If `level` is not a known log level.

    Examples
    --------
    >>> level_rank("debug"), level_rank("WARNING")
    (0, 3)
    """
    try:
        return LEVELS.index(str(level).lower())
    except ValueError:
        raise ValueError(
            f"unknown log level {level!r}, expected one of {LEVELS}"
        ) from None
