"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Logging setup, the node data directory and energi.conf reading.
"""

import configparser
import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
import os
import platform
from pathlib import Path
import sys
from typing import Dict, Iterable, Optional, Union

from appdirs import AppDirs  # type: ignore


LogFormat = "%(asctime)s %(name)s %(levelname)s %(funcName)s(%(lineno)d) %(message)s"

# Rotate the log file at 5 MB, keeping two old files.
LogFileMaxBytes = 5 * 1024 * 1024
LogFileBackups = 2


class LogSettings:
    """
    Levels and loggers shared by getLogger and prepareLogging.
    """

    root = logging.getLogger("")
    defaultLevel = logging.INFO
    moduleLevels: Dict[str, int] = {}
    loggers: Dict[str, Logger] = {}


LogSettings.root.setLevel(logging.NOTSET)


def prepareLogging(
    filepath: Union[Path, str, None] = None,
    logLvl: int = logging.INFO,
    lvlMap: Optional[Dict[str, int]] = None,
) -> None:
    """
    Attach the log handlers to the root logger and set the levels. Output goes
    to stdout and, if filepath is given, to a rotating log file. The levels of
    loggers already handed out by getLogger are updated too.

    Args:
        filepath: The log file path. Optional.
        logLvl: The level for any logger without an entry in lvlMap.
        lvlMap: Per-logger levels, keyed by the name passed to getLogger.
    """
    LogSettings.defaultLevel = logLvl
    if lvlMap:
        LogSettings.moduleLevels.update(lvlMap)
    for name, logger in LogSettings.loggers.items():
        logger.setLevel(LogSettings.moduleLevels.get(name, logLvl))

    formatter = logging.Formatter(LogFormat)
    if filepath:
        fileHandler = RotatingFileHandler(
            filepath, maxBytes=LogFileMaxBytes, backupCount=LogFileBackups
        )
        fileHandler.setFormatter(formatter)
        LogSettings.root.addHandler(fileHandler)
    # pythonw on Windows has no console.
    if not sys.executable.endswith("pythonw.exe"):
        printHandler = logging.StreamHandler(sys.stdout)
        printHandler.setFormatter(formatter)
        LogSettings.root.addHandler(printHandler)


def getLogger(name: str) -> Logger:
    """
    A child of the root logger, at the level registered for name with
    prepareLogging, or the default level.

    Args:
        name: The logger name, by convention the upper-case subsystem name.
    """
    logger = LogSettings.root.getChild(name)
    logger.setLevel(LogSettings.moduleLevels.get(name, LogSettings.defaultLevel))
    LogSettings.loggers[name] = logger
    return logger


def readINI(path: Union[Path, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Read an energi.conf style file. Settings before the first section header
    are allowed. Every section is searched, and a later value for a key
    replaces an earlier one. Values are taken as written, with no % interpolation.
    Keys not in keys are never read.

    Args:
        path: The configuration file.
        keys: The keys of interest.

    Returns:
        The keys found, with their string values.
    """
    parser = configparser.ConfigParser(strict=False, interpolation=None)
    with open(path) as f:
        # Give the leading, sectionless settings a section of their own.
        parser.read_string("[energi]\n" + f.read())
    found = {}
    for section in parser.sections():
        for k in keys:
            if k in parser[section]:
                found[k] = parser[section][k]
    return found


def appDataDir(appName: str) -> str:
    """
    The per-user data directory for appName.

        Windows: the appdirs user data directory, e.g. %LOCALAPPDATA%\\Energicore
        macOS: ~/Library/Application Support/Energicore
        others: ~/.energicore

    Args:
        appName: The application name. A leading period is ignored.

    Returns:
        The directory path. The current directory if appName is empty or no
            home directory can be found.
    """
    appName = appName.lstrip(".")
    if not appName:
        return "."

    homeDir = os.path.expanduser("~")
    if homeDir in ("", "~"):
        homeDir = os.getenv("HOME", "")

    opSys = platform.system()
    if opSys == "Windows":
        return AppDirs(appName.capitalize(), "").user_data_dir
    if not homeDir:
        return "."
    if opSys == "Darwin":
        return os.path.join(
            homeDir, "Library", "Application Support", appName.capitalize()
        )
    return os.path.join(homeDir, "." + appName.lower())
