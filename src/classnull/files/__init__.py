#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Aug 15 2025
@author: ike
"""


from .yamls import load_settings, save_settings
