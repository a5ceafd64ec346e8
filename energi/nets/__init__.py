"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

The registry of known networks and the process-wide active network.
"""

from energi import EnergiError, fatal
from energi.chaincfg import ChainParams
from energi.util import helpers

from . import mainnet, regtest, testnet, testnet60x


log = helpers.getLogger("NETS")

MAIN = mainnet.Name
TESTNET = testnet.Name
TESTNET60X = testnet60x.Name
REGTEST = regtest.Name


class UnknownNetworkError(EnergiError):
    """
    The requested network is not registered. Usually the result of a bad
    command line flag or configuration value.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"unknown chain {name}")


class NetRegistry:
    """
    NetRegistry maps network names to their ChainParams.
    """

    def __init__(self):
        self.params = {}

    def __contains__(self, name):
        return name in self.params

    def register(self, params):
        """
        Add the parameter set under its name.

        Args:
            params (ChainParams): The parameters.
        """
        if params.name in self.params:
            raise EnergiError(f"network {params.name} is already registered")
        self.params[params.name] = params

    def lookup(self, name):
        """
        Get the parameters for the named network.

        Args:
            name (str): The network name.

        Returns:
            ChainParams: The network parameters.
        """
        try:
            return self.params[name]
        except KeyError:
            raise UnknownNetworkError(name)

    def names(self):
        """The registered network names, in registration order."""
        return list(self.params)


def netModules(enableTestnet60x=False):
    """
    The network parameter modules, main network first. The 60x test network is
    only included when enabled.
    """
    mods = [mainnet, testnet]
    if enableTestnet60x:
        mods.append(testnet60x)
    mods.append(regtest)
    return mods


def buildRegistry(enableTestnet60x=False):
    """
    Build the parameters for every known network. Each network's genesis block
    is verified as it is built.

    Args:
        enableTestnet60x (bool): Register the 60x test network.

    Returns:
        NetRegistry: The populated registry.
    """
    reg = NetRegistry()
    for mod in netModules(enableTestnet60x):
        reg.register(ChainParams(mod))
    return reg


class ActiveParams:
    """
    ActiveParams holds the network parameters selected at startup. It is
    written exactly once. Reading it before selection, or selecting twice, is a
    fatal programming error.
    """

    def __init__(self):
        self._params = None

    def select(self, params):
        """
        Args:
            params (ChainParams): The parameters for the chosen network.
        """
        if self._params is not None:
            fatal(
                f"cannot select network {params.name},"
                f" {self._params.name} is already selected"
            )
        self._params = params
        log.info(f"selected network {params.name}")

    def current(self):
        """
        Returns:
            ChainParams: The selected network parameters.
        """
        if self._params is None:
            fatal("network parameters requested before a network was selected")
        return self._params

    def isSelected(self):
        return self._params is not None


_registry = None

# The process-wide handle. Pass it to subsystems that need the active network.
active = ActiveParams()


def registry(enableTestnet60x=False):
    """
    The process-wide registry, built on first use. Requesting the 60x test
    network adds it to a registry that was built without it.

    Args:
        enableTestnet60x (bool): Make sure the 60x test network is registered.

    Returns:
        NetRegistry: The registry.
    """
    global _registry
    if _registry is None:
        _registry = buildRegistry(enableTestnet60x)
    elif enableTestnet60x and TESTNET60X not in _registry:
        _registry.register(ChainParams(testnet60x))
    return _registry


def parse(name):
    """
    Get the network parameters based on the network name.

    Args:
        name (str): The network name.

    Returns:
        ChainParams: The network parameters.
    """
    return registry().lookup(name)


def selectParams(name):
    """
    Look up the named network and make it the active network.

    Args:
        name (str): The network name.

    Returns:
        ChainParams: The selected parameters.
    """
    params = parse(name)
    active.select(params)
    return params


def params():
    """The active network's parameters."""
    return active.current()
