#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Jul 21 2025
@author: ike
"""


from .console import LEVELS, current_date_time, level_rank
from .riches import RichLog
