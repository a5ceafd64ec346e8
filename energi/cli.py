"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

energi-chainparams selects a network, verifies its genesis block and prints
a summary of its parameters.
"""

import logging
import sys

from energi import EnergiError
from energi import config, nets
from energi.wire import msgblock
from energi.util import helpers


log = helpers.getLogger("CLI")


def summary(params, dataDir):
    """
    The printable summary of the network parameters.

    Args:
        params (ChainParams): The network parameters.
        dataDir (str): The network's data directory.

    Returns:
        list(str): The summary lines.
    """
    header = params.genesis.header
    return [
        f"network:       {params.name}",
        f"genesis hash:  {params.genesisHash()}",
        f"merkle root:   {header.merkleRoot.rhex()}",
        f"genesis bits:  {header.bits:#010x}",
        f"message start: {params.messageStart.hex()}",
        f"p2p port:      {params.defaultPort}",
        f"rpc port:      {params.rpcPort}",
        f"data dir:      {dataDir}",
        f"backbone:      {params.backboneAddress()}",
    ]


def main(argv=None, environ=None, out=None):
    """
    Run the command.

    Args:
        argv (list(str)): Command line arguments. Defaults to sys.argv.
        environ (dict): The environment. Defaults to os.environ.
        out (file): Where the summary is written. Defaults to stdout.

    Returns:
        int: The exit status.
    """
    out = out or sys.stdout
    try:
        cfg = config.load(argv, environ)
        if cfg.debug:
            helpers.prepareLogging(logLvl=logging.DEBUG)
        if cfg.blockHasher:
            msgblock.setBlockHasher(config.loadBlockHasher(cfg.blockHasher))
        nets.registry(cfg.enableTestnet60x)
        params = nets.selectParams(cfg.netName)
    except EnergiError as e:
        log.error(f"cannot select network: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for line in summary(params, config.networkDataDir(params, cfg.dataDir)):
        print(line, file=out)
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
