#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Jul 21 2025
@author: ike
"""


from .nullobject import NullObject, null_object, obtain, is_null, coalesce
from .collaborator import Collaborator, collaborators
