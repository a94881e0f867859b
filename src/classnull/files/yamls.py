#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Aug 15 2025
@author: ike
"""


# 1. Standard library imports
import warnings
from pathlib import Path

# 2. Third-party library imports
import yaml


def save_settings(
        file: Path,
        settings: dict
):
    """Save settings in yaml format.

    Parameters
    ----------
    file : Path
        Path to save settings (.yaml).
    settings : dict
        Settings to save.
    """
    with open(Path(file).with_suffix(".yaml"), "w") as f:
        yaml.safe_dump(dict(settings), f, sort_keys=False)


def load_settings(
        file: Path,
        defaults: dict
):
    """Load settings in yaml format on top of default values.

    Parameters
    ----------
    file : Path
        Path to load settings (.yaml).
    defaults : dict
        Default value of every recognized setting.

    Returns
    -------
    settings : dict
        Copy of `defaults` updated with values found in `file`. Unrecognized
        keys are dropped with a warning.

    Raises
    ------
    ValueError
        If the file does not contain a yaml mapping.
    """
    settings = dict(defaults)
    file = Path(file).with_suffix(".yaml")
    if not file.is_file():
        return settings

    with open(file, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return settings
    elif not isinstance(data, dict):
        raise ValueError(
            f"{file.name}: expected a mapping, got {type(data).__name__}")

    unknown = [k for k in data if k not in settings]
    if len(unknown) > 0:
        warnings.warn(f"{file.name}: ignoring {', '.join(map(str, unknown))}")
    settings.update({k: v for k, v in data.items() if k in settings})
    return settings
