#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Jul 21 2025
@author: ike
"""


__version__ = "1.0.4"


# 3. Local application / relative imports
from .classes import *
from .standard import *

from . import files
from . import classes
from . import standard
from .classes import nullobject
