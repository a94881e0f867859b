#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jan 22 09:00:00 2025
@author: ike
"""


# 1. Standard library imports
import numbers
import threading


def _is_dunder(
        name: str
):
    """Check if a name is reserved for interpreter protocols.

    Parameters
    ----------
    name : str
        Attribute name.

    Returns
    -------
    bool
        True if `name` has the form __name__.

    Examples
    --------
    >>> _is_dunder("__copy__"), _is_dunder("__"), _is_dunder("__private")
    (True, False, False)
    """
    return (
        len(name) > 4 and name[:2] == name[-2:] == "__"
        and name[2] != "_" and name[-3] != "_")


def _zero(
        other
):
    """Get the zero value matching the type of an operand."""
    if isinstance(other, str):
        return ""
    elif isinstance(other, numbers.Number):
        return 0
    return NotImplemented


def _number(
        other
):
    """Get the numeric value of an operand, reading nulls as zero."""
    if isinstance(other, NullObject):
        return 0
    elif isinstance(other, numbers.Number):
        return other
    return NotImplemented


class NullObject:
    """Null class where all attribute and function calls return self.

    Every instantiation returns the same shared instance. Unknown names,
    calls, and subscripts resolve to that instance, so chains of any length
    never fail. In value contexts the instance behaves as False, 0, and "".

    Examples
    --------
    >>> null = NullObject()
    >>> null.frobnicate().spam("eggs", ham=1).eggs is null
    True
    >>> bool(null), int(null), str(null)
    (False, 0, '')
    >>> null + 5, 3 + null, -null - 7
    (5, 3, -7)
    >>> "<<<" + str(null) + ">>>"
    '<<<>>>'
    >>> max(null, 3), null < 1, round(null), f"{null:.2f}"
    (3, True, 0, '0.00')
    """
    __slots__ = ()
    _instance = None
    _lock = threading.Lock()

    def __new__(
            cls,
            *args,
            **kwargs
    ):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(
            self,
            *args,
            **kwargs
    ):
        pass

    def __getattr__(self, name):
        if _is_dunder(name):
            raise AttributeError(name)
        return self

    def __setattr__(self, name, value):
        pass

    def __delattr__(self, name):
        pass

    def __call__(self, *args, **kwargs):
        return self

    def __getitem__(self, key):
        return self

    def __setitem__(self, key, value):
        pass

    def __delitem__(self, key):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        return False

    # value contexts
    def __bool__(self):
        return False

    def __int__(self):
        return 0

    def __index__(self):
        return 0

    def __float__(self):
        return 0.0

    def __complex__(self):
        return 0j

    def __str__(self):
        return ""

    def __format__(self, format_spec):
        try:
            return format("", format_spec)
        except ValueError:
            # numeric format codes
            return format(0, format_spec)

    def __repr__(self):
        return "Null"

    def __len__(self):
        return 0

    def __iter__(self):
        return iter(())

    def __contains__(self, item):
        return False

    # identity
    def __eq__(self, other):
        if isinstance(other, NullObject):
            return True
        return NotImplemented

    def __hash__(self):
        return hash(NullObject)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return obtain, ()

    # ordering with the value taken as zero
    def __lt__(self, other):
        other = _number(other)
        return other if other is NotImplemented else 0 < other

    def __le__(self, other):
        other = _number(other)
        return other if other is NotImplemented else 0 <= other

    def __gt__(self, other):
        other = _number(other)
        return other if other is NotImplemented else 0 > other

    def __ge__(self, other):
        other = _number(other)
        return other if other is NotImplemented else 0 >= other

    def __round__(self, ndigits=None):
        return round(0, ndigits)

    def __trunc__(self):
        return 0

    def __floor__(self):
        return 0

    def __ceil__(self):
        return 0

    # arithmetic with the value taken as zero
    def __add__(self, other):
        zero = _zero(other)
        return zero if zero is NotImplemented else zero + other

    def __radd__(self, other):
        zero = _zero(other)
        return zero if zero is NotImplemented else other + zero

    def __sub__(self, other):
        zero = _zero(other)
        if zero is NotImplemented or isinstance(other, str):
            return NotImplemented
        return zero - other

    def __rsub__(self, other):
        zero = _zero(other)
        if zero is NotImplemented or isinstance(other, str):
            return NotImplemented
        return other - zero

    def __mul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return 0 * other

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return 0 / other

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return other / 0

    def __floordiv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return 0 // other

    def __rfloordiv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return other // 0

    def __mod__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return 0 % other

    def __rmod__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return other % 0

    def __pow__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return 0 ** other

    def __rpow__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return other ** 0

    def __divmod__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return divmod(0, other)

    def __rdivmod__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return divmod(other, 0)

    # bitwise operations against integers
    def __and__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return 0 & other

    __rand__ = __and__

    def __or__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return 0 | other

    __ror__ = __or__

    def __xor__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return 0 ^ other

    __rxor__ = __xor__

    def __lshift__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return 0 << other

    def __rlshift__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return other << 0

    def __rshift__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return 0 >> other

    def __rrshift__(self, other):
        if not isinstance(other, numbers.Integral):
            return NotImplemented
        return other >> 0

    def __neg__(self):
        return self

    def __pos__(self):
        return self

    def __abs__(self):
        return self

    def __invert__(self):
        return self


null_object = NullObject()


def obtain(
):
    """Get the shared null instance.

    Returns
    -------
    NullObject
        Canonical null instance.

    Examples
    --------
    >>> obtain() is obtain() is null_object
    True
    """
    return null_object


def is_null(
        obj
):
    """Check if an object is the null instance.

    Parameters
    ----------
    obj
        Object to check.

    Returns
    -------
    bool
        True if `obj` is a NullObject.

    Examples
    --------
    >>> is_null(obtain()), is_null(None), is_null(0)
    (True, False, False)
    """
    return isinstance(obj, NullObject)


def coalesce(
        obj
):
    """Replace None with the null instance.

    Parameters
    ----------
    obj
        Possibly absent collaborator.

    Returns
    -------
    object
        `obj` if it is not None, otherwise the null instance.

    Examples
    --------
    >>> coalesce(None).log(level="debug", message="absorbed")
    Null
    >>> coalesce("present")
    'present'
    """
    return null_object if obj is None else obj
