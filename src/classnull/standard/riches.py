#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jan 22 09:00:00 2025
@author: ike
"""


# 1. Standard library imports
from pathlib import Path

# 2. Third-party library imports
from rich.text import Text
from rich.console import Console
from rich.traceback import install

# 3. Local application / relative imports
from .console import LEVELS, current_date_time, level_rank
from ..files.yamls import load_settings


install(show_locals=True, width=120)


STYLES = {
    "debug": "dim",
    "info": "cyan",
    "notice": "green",
    "warning": "yellow",
    "error": "bold red",
    "critical": "bold white on red",
    "alert": "bold white on red",
    "emergency": "bold white on red"}


class RichLog:
    """Log collaborator that prints leveled messages to a rich console.

    Drop-in counterpart of the null instance: objects that hold a log slot
    call ``log(level=..., message=...)`` on whichever they were given.

    Class Attributes
    ----------------
    DEFAULTS : dict
        Recognized settings and their default values.

    Attributes
    ----------
    min_level : str
        Lowest level that is printed.
    console : Console
        Rich console that receives output.
    timestamps : bool
        If True, prefix each line with current date and time.

    Parameters
    ----------
    min_level : str, optional
        Lowest level that is printed.
        Defaults to "debug".
    console : Console, optional
        Rich console that receives output.
        Defaults to None, in which case a stderr console is created.
    timestamps : bool, optional
        If True, prefix each line with current date and time.
        Defaults to True.
    """
    DEFAULTS = {"min_level": "debug", "timestamps": True}

    def __init__(
            self,
            min_level: str = "debug",
            console: Console = None,
            timestamps: bool = True
    ):
        self._rank = level_rank(min_level)
        self.min_level = LEVELS[self._rank]
        self.console = Console(stderr=True) if console is None else console
        self.timestamps = bool(timestamps)

    def __repr__(
            self
    ):
        return f"RichLog(min_level={self.min_level!r})"

    @classmethod
    def from_yaml(
            cls,
            file: Path,
            console: Console = None
    ):
        """Instantiate from a yaml settings file.

        Parameters
        ----------
        file : Path
            Path to settings (.yaml). Missing keys use DEFAULTS.
        console : Console, optional
            Rich console that receives output.
            Defaults to None.

        Returns
        -------
        RichLog
            Configured log.
        """
        settings = load_settings(file, cls.DEFAULTS)
        return cls(console=console, **settings)

    def settings(
            self
    ):
        """Get current settings in the same form accepted by from_yaml."""
        return {"min_level": self.min_level, "timestamps": self.timestamps}

    def would_log(
            self,
            level: str
    ):
        """Check if a message at a given level would be printed.

        Parameters
        ----------
        level : str
            Log level name.

        Returns
        -------
        bool
            True if `level` is at or above `min_level`.
        """
        return level_rank(level) >= self._rank

    def log(
            self,
            level: str = "info",
            message: str = ""
    ):
        """Print a message if its level is high enough.

        Parameters
        ----------
        level : str, optional
            Log level name.
            Defaults to "info".
        message : str, optional
            Message to print.
            Defaults to "".

        Returns
        -------
        bool
            True if the message was printed.
        """
        if not self.would_log(level):
            return False

        level = LEVELS[level_rank(level)]
        line = Text()
        if self.timestamps:
            line.append(" ".join(current_date_time()) + " ", style="dim")
        line.append(f"[{level.upper()}]", style=STYLES[level])
        line.append(f" {message}")
        self.console.print(line)
        return True

    def debug(self, message: str):
        return self.log(level="debug", message=message)

    def info(self, message: str):
        return self.log(level="info", message=message)

    def notice(self, message: str):
        return self.log(level="notice", message=message)

    def warning(self, message: str):
        return self.log(level="warning", message=message)

    def error(self, message: str):
        return self.log(level="error", message=message)

    def critical(self, message: str):
        return self.log(level="critical", message=message)

    def alert(self, message: str):
        return self.log(level="alert", message=message)

    def emergency(self, message: str):
        return self.log(level="emergency", message=message)
