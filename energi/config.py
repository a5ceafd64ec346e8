"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Chain selection from the command line and the configuration file.
"""

import argparse
import importlib
import os

from energi import EnergiError
from energi import nets
from energi.util import helpers


APP_NAME = "energicore"

# The configuration file name, found in the data directory.
CONFIG_NAME = "energi.conf"

# Setting this environment variable to a true value makes the 60x test network
# available, the same as --enable-testnet60x.
ENABLE_TESTNET60X_ENV = "ENERGI_ENABLE_TESTNET60X"

ConfigKeys = ("testnet", "testnet60x", "regtest", "network", "blockhasher")

InvalidCombinationMsg = (
    "Invalid combination of -regtest, -testnet and/or -testnet60x."
    " Can't be used together."
)

log = helpers.getLogger("CONFIG")


def defaultDataDir():
    """The OS-appropriate data directory."""
    return helpers.appDataDir(APP_NAME)


def isTrue(v):
    """
    Interpret a configuration value as a boolean. Missing values are False.
    """
    if v is None:
        return False
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in ("1", "true", "yes", "on")


def testnet60xEnabled(args=None, environ=None):
    """
    Whether the 60x test network feature flag is set, on the command line or in
    the environment.

    Args:
        args (argparse.Namespace): Parsed arguments. Optional.
        environ (dict): The environment. Defaults to os.environ.

    Returns:
        bool: True if the 60x test network is enabled.
    """
    environ = os.environ if environ is None else environ
    if args is not None and getattr(args, "enable_testnet60x", False):
        return True
    return isTrue(environ.get(ENABLE_TESTNET60X_ENV))


def makeParser():
    """
    The argument parser. Network selection flags are mutually exclusive.

    Returns:
        argparse.ArgumentParser: The parser.
    """
    parser = argparse.ArgumentParser(
        prog="energi-chainparams",
        description="Select an Energi network and show its chain parameters.",
    )
    parser.add_argument("--datadir", help="the data directory")
    parser.add_argument(
        "--conf", help=f"the configuration file, default <datadir>/{CONFIG_NAME}"
    )
    parser.add_argument(
        "--enable-testnet60x",
        action="store_true",
        help="make the 60x accelerated test network available",
    )
    parser.add_argument("--debug", action="store_true", help="debug logging")
    parser.add_argument(
        "--blockhasher",
        metavar="MODULE:NAME",
        help="the block header hasher to verify genesis blocks with",
    )
    netGroup = parser.add_mutually_exclusive_group()
    netGroup.add_argument("--testnet", action="store_true", help="use testnet")
    netGroup.add_argument(
        "--testnet60x", action="store_true", help="use the 60x accelerated testnet"
    )
    netGroup.add_argument("--regtest", action="store_true", help="use regtest")
    netGroup.add_argument("--network", help="select the network by name")
    return parser


def readConfigFile(path):
    """
    Read the chain selection settings from the configuration file. A missing
    file is the same as an empty one.

    Args:
        path (str): The configuration file path.

    Returns:
        dict: The settings found.
    """
    if not os.path.isfile(path):
        log.debug(f"no configuration file at {path}")
        return {}
    return helpers.readINI(path, ConfigKeys)


def loadBlockHasher(path):
    """
    Import a block hasher named as MODULE:NAME. If NAME is a class, an
    instance is returned.

    Args:
        path (str): The hasher's module and attribute, e.g.
            energi.wire.msgblock:DoubleSHA256Hasher.

    Returns:
        object: The hasher, with blockHash and powHash methods.
    """
    modName, _, attr = path.partition(":")
    if not modName or not attr:
        raise EnergiError(f"block hasher {path} is not in MODULE:NAME form")
    try:
        hasher = getattr(importlib.import_module(modName), attr)
    except (ImportError, AttributeError) as e:
        raise EnergiError(f"cannot load block hasher {path}: {e}")
    if isinstance(hasher, type):
        hasher = hasher()
    if not (hasattr(hasher, "blockHash") and hasattr(hasher, "powHash")):
        raise EnergiError(f"block hasher {path} has no blockHash and powHash methods")
    log.debug(f"loaded block hasher {path}")
    return hasher


def chainNameFromArgs(args, fileCfg=None, enableTestnet60x=False):
    """
    Decide the network from the command line and configuration file settings.
    The main network is the default.

    Args:
        args (argparse.Namespace): Parsed arguments.
        fileCfg (dict): Settings from the configuration file.
        enableTestnet60x (bool): Whether the 60x test network may be chosen.

    Returns:
        str: The network name.
    """
    fileCfg = fileCfg or {}
    regtest = bool(args.regtest) or isTrue(fileCfg.get("regtest"))
    testnet = bool(args.testnet) or isTrue(fileCfg.get("testnet"))
    testnet60x = bool(args.testnet60x) or isTrue(fileCfg.get("testnet60x"))
    network = args.network or fileCfg.get("network")

    if regtest + testnet + testnet60x + bool(network) > 1:
        raise EnergiError(InvalidCombinationMsg)
    if testnet60x and not enableTestnet60x:
        raise EnergiError(
            f"-testnet60x is disabled, use --enable-testnet60x or set"
            f" {ENABLE_TESTNET60X_ENV}=1"
        )
    if network:
        return network
    if regtest:
        return nets.REGTEST
    if testnet60x:
        return nets.TESTNET60X
    if testnet:
        return nets.TESTNET
    return nets.MAIN


def networkDataDir(params, baseDir=None):
    """
    The data directory for the network. The main network uses the base
    directory itself.

    Args:
        params (ChainParams): The network parameters.
        baseDir (str): The base data directory. Defaults to the OS-appropriate
            location.

    Returns:
        str: The directory path.
    """
    baseDir = baseDir or defaultDataDir()
    if not params.dataDir:
        return baseDir
    return os.path.join(baseDir, params.dataDir)


class EnergiConfig:
    """
    EnergiConfig is the configuration resolved from the command line, the
    configuration file and the environment.
    """

    def __init__(self, argv=None, environ=None):
        """
        Args:
            argv (list(str)): Command line arguments, without the program name.
                Defaults to sys.argv.
            environ (dict): The environment. Defaults to os.environ.
        """
        self.args = makeParser().parse_args(argv)
        self.dataDir = self.args.datadir or defaultDataDir()
        self.configPath = self.args.conf or os.path.join(self.dataDir, CONFIG_NAME)
        self.file = readConfigFile(self.configPath)
        self.enableTestnet60x = testnet60xEnabled(self.args, environ)
        self.debug = self.args.debug
        self.blockHasher = self.args.blockhasher or self.file.get("blockhasher")
        self.netName = chainNameFromArgs(self.args, self.file, self.enableTestnet60x)


def load(argv=None, environ=None):
    """
    Parse the command line and read the configuration file.

    Args:
        argv (list(str)): Command line arguments. Defaults to sys.argv.
        environ (dict): The environment. Defaults to os.environ.

    Returns:
        EnergiConfig: The configuration.
    """
    return EnergiConfig(argv, environ)
