# MIT License (see LICENSE)
"""
Exception types raised by the kinematics engine.

Every error derives from KinematicsError so callers can catch the whole
family at once, and each one also derives from the matching builtin so
code written against ValueError/RuntimeError/MemoryError keeps working.
"""
from __future__ import annotations


class KinematicsError(Exception):
    """Base class for all kinematics2d errors."""


class InvalidArgumentError(KinematicsError, ValueError):
    """
    A caller-supplied value is unusable.

    Raised for a non-finite or negative timestep, a non-positive mass at
    creation time, bad integrator configuration and malformed JSON data.
    """


class InvalidStateError(KinematicsError, RuntimeError):
    """
    An object is in a state that forbids the requested operation.

    Raised when updating a destroyed Solid or one whose mass was changed to
    a value that cannot be divided by.
    """


class AllocationFailedError(KinematicsError, MemoryError):
    """Creating a Solid ran out of memory."""
