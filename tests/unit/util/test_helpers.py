"""
Copyright (c) 2020, The Energi Core developers
See LICENSE for details
"""

import logging
import os
import os.path
from pathlib import Path
import platform

from appdirs import AppDirs

from energi.util import helpers


def test_prepareLogging(tmp_path):
    path = tmp_path / "test.log"
    helpers.prepareLogging(filepath=path)
    logger = helpers.getLogger("1")
    logger1 = logger
    assert logger.getEffectiveLevel() == logging.INFO

    logger.info("something")
    assert path.is_file()

    helpers.prepareLogging(filepath=path, logLvl=logging.DEBUG)
    logger = helpers.getLogger("2")
    assert logger.getEffectiveLevel() == logging.DEBUG

    helpers.prepareLogging(
        filepath=path,
        logLvl=logging.INFO,
        lvlMap={"1": logging.NOTSET, "3": logging.WARNING},
    )
    logger = helpers.getLogger("3")
    assert logger.getEffectiveLevel() == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.NOTSET


def test_readINI(tmp_path):
    path = tmp_path / "energi.conf"
    path.write_text("testnet=1\nrpcport=1234\n\n[other]\nnetwork = regtest\n")
    cfg = helpers.readINI(path, ["testnet", "network", "regtest"])
    assert cfg == {"testnet": "1", "network": "regtest"}

    # Later sections override earlier settings.
    path.write_text("regtest=0\n[main]\nregtest=1\n")
    assert helpers.readINI(str(path), ("regtest",)) == {"regtest": "1"}

    # Values are not interpolated, wanted or not.
    path.write_text("rpcpassword=ab%cd\nnetwork=te%st\n")
    assert helpers.readINI(path, ("network", "regtest")) == {"network": "te%st"}


def test_appDataDir(monkeypatch):
    """
    Tests appDataDir to ensure it gives expected results for various operating
    systems.
    """
    appName = "energicore"
    appNameUpper = appName.capitalize()
    homeDir = Path.home()

    winLocal = AppDirs(appNameUpper, "").user_data_dir
    posixPath = Path(homeDir, "." + appName)
    macPath = Path(homeDir, "Library", "Application Support", appNameUpper)

    """
    Tests are 3-tuples:

    opSys (str): Operating system.
    appName (str): The appDataDir argument.
    want (str): The expected result
    """
    tests = [
        ("Windows", appName, winLocal),
        ("Windows", "." + appNameUpper, winLocal),
        ("Linux", appName, posixPath),
        ("Linux", appNameUpper, posixPath),
        ("Linux", "." + appName, posixPath),
        ("Darwin", appName, macPath),
        ("Darwin", "." + appNameUpper, macPath),
        ("FreeBSD", appName, posixPath),
        ("unrecognized", appName, posixPath),
        # No application name provided, so expect current directory.
        ("Linux", "", "."),
        ("Darwin", ".", "."),
    ]

    def testplatform():
        return opSys

    monkeypatch.setattr(platform, "system", testplatform)

    for opSys, name, want in tests:
        ret = helpers.appDataDir(name)
        assert str(want) == str(ret), (opSys, name, want)

    def testexpanduser(s):
        return ""

    def testgetenv(s, default=None):
        return ""

    opSys = "Linux"
    monkeypatch.setattr(os.path, "expanduser", testexpanduser)
    monkeypatch.setattr(os, "getenv", testgetenv)
    assert helpers.appDataDir(appName) == "."
