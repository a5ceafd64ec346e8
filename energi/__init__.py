"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details
"""

import os

from energi.util import helpers


class EnergiError(Exception):
    pass


class FatalError(Exception):
    """
    Raised by fatal when the installed abort hook returns instead of ending
    the process. Execution never continues past a fatal condition. It is not an
    EnergiError, so handlers for recoverable errors never catch it.
    """

    pass


log = helpers.getLogger("ENERGI")


def _abortProcess(msg):
    os.abort()


_abortHook = _abortProcess


def setAbortHook(hook):
    """
    Install the function called for fatal conditions. The default hook aborts
    the process.

    Args:
        hook (func(str)): The new abort hook.

    Returns:
        func(str): The previously installed hook.
    """
    global _abortHook
    prev = _abortHook
    _abortHook = hook
    return prev


def fatal(msg):
    """
    Report an internal consistency violation, such as a broken parameter table
    or a query for the active network before one was selected. These are never
    recoverable.

    Args:
        msg (str): A description of the violation.

    Raises:
        FatalError: if the abort hook returns.
    """
    log.critical(msg)
    _abortHook(msg)
    raise FatalError(msg)
