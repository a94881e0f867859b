#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Thu May 8 09:00:00 2025
@author: ike
"""


# 3. Local application / relative imports
from .nullobject import coalesce, null_object


class Collaborator:
    """Descriptor for an optional helper object that is never absent.

    Unset slots, and slots assigned None, read as the shared null instance,
    so owners call their helpers without checking whether one was supplied.

    Attributes
    ----------
    name : str
        Name of the managed attribute on the owner class.

    Examples
    --------
    >>> class Worker:
    ...     log = Collaborator()
    ...
    ...     def do_it(self):
    ...         self.log.log(level="debug", message="starting to do it")
    ...         return "done"
    >>> worker = Worker()
    >>> worker.log
    Null
    >>> worker.do_it()
    'done'
    """
    def __init__(
            self
    ):
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(
            self,
            instance,
            owner=None
    ):
        if instance is None:
            return self
        return instance.__dict__.get(self.name, null_object)

    def __set__(
            self,
            instance,
            value
    ):
        instance.__dict__[self.name] = coalesce(value)

    def __delete__(
            self,
            instance
    ):
        instance.__dict__.pop(self.name, None)


def collaborators(
        obj
):
    """Get current value of every collaborator slot on an object.

    Parameters
    ----------
    obj
        Instance of a class that declares Collaborator attributes.

    Returns
    -------
    slots : dict
        key : str
            Slot name. Slots are ordered base classes first.
        value : object
            Current collaborator, or the null instance if unset.
    """
    slots = {}
    for cls in reversed(type(obj).__mro__):
        for name, attr in vars(cls).items():
            if isinstance(attr, Collaborator):
                slots[name] = getattr(obj, name)

    return slots
