"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

Chain parameters. A ChainParams is built once from one of the network modules
in energi.nets and never changes afterwards. Building it verifies the subsidy
split and the genesis block.
"""

from types import MappingProxyType

from energi import EnergiError, fatal
from energi.util import helpers

from . import addrlib, genesis, pow, txscript


log = helpers.getLogger("CHAINCFG")


class Frozen:
    """
    Attributes can be assigned until freeze is called. After that any
    assignment raises an EnergiError.
    """

    _frozen = False

    def freeze(self):
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, k, v):
        if self._frozen:
            raise EnergiError(
                f"cannot set {k} on immutable {type(self).__name__}"
            )
        object.__setattr__(self, k, v)

    def __delattr__(self, k):
        raise EnergiError(f"cannot delete {k} from {type(self).__name__}")


class Deployment(Frozen):
    """
    A BIP9 soft fork deployment. A windowSize or threshold of zero means the
    chain-wide MinerConfirmationWindow or RuleChangeActivationThreshold
    applies.
    """

    def __init__(self, bit, startTime, timeout, windowSize=0, threshold=0):
        self.bit = bit
        self.startTime = startTime
        self.timeout = timeout
        self.windowSize = windowSize
        self.threshold = threshold
        self.freeze()

    def __eq__(self, other):
        return isinstance(other, Deployment) and (
            (self.bit, self.startTime, self.timeout, self.windowSize, self.threshold)
            == (
                other.bit,
                other.startTime,
                other.timeout,
                other.windowSize,
                other.threshold,
            )
        )

    def __repr__(self):
        return (
            f"Deployment(bit={self.bit}, startTime={self.startTime},"
            f" timeout={self.timeout}, windowSize={self.windowSize},"
            f" threshold={self.threshold})"
        )


class CheckpointData(Frozen):
    """
    Known block hashes, keyed by height, with statistics for estimating
    verification progress up to the last checkpoint.
    """

    def __init__(self, checkpoints, lastCheckpointTime, txCount, txPerDay):
        """
        Args:
            checkpoints (dict(int, str)): Height to block hash, in display byte
                order.
            lastCheckpointTime (int): The UNIX time of the last checkpoint
                block.
            txCount (int): The number of transactions up to the last
                checkpoint.
            txPerDay (float): The estimated number of transactions per day
                after the last checkpoint.
        """
        self.checkpoints = MappingProxyType(dict(checkpoints))
        self.lastCheckpointTime = lastCheckpointTime
        self.txCount = txCount
        self.txPerDay = txPerDay
        self.freeze()


class ConsensusParams(Frozen):
    """
    The consensus rules of a network.
    """

    def __init__(self, netModule, backboneScript, hashGenesisBlock):
        """
        Args:
            netModule (module): A network parameter module from energi.nets.
            backboneScript (ByteArray): The script paid the backbone share of
                the block subsidy.
            hashGenesisBlock (ByteArray): The genesis block hash.
        """
        m = netModule
        self.hashGenesisBlock = hashGenesisBlock

        self.backboneScript = backboneScript
        self.blockSubsidy = m.BlockSubsidy
        self.blockSubsidyBackbone = m.BlockSubsidyBackbone
        self.blockSubsidyMiners = m.BlockSubsidyMiners
        self.blockSubsidyMasternodes = m.BlockSubsidyMasternodes

        self.superblockCycle = m.SuperblockCycle
        self.regularTreasuryBudget = m.RegularTreasuryBudget
        self.specialTreasuryBudget = m.SpecialTreasuryBudget
        self.specialTreasuryBudgetBlock = m.SpecialTreasuryBudgetBlock

        self.masternodePaymentsStartBlock = m.MasternodePaymentsStartBlock
        self.instantSendKeepLock = m.InstantSendKeepLock
        self.budgetProposalEstablishingTime = m.BudgetProposalEstablishingTime
        self.governanceMinQuorum = m.GovernanceMinQuorum
        self.governanceFilterElements = m.GovernanceFilterElements
        self.masternodeMinimumConfirmations = m.MasternodeMinimumConfirmations
        self.majorityEnforceBlockUpgrade = m.MajorityEnforceBlockUpgrade
        self.majorityRejectBlockOutdated = m.MajorityRejectBlockOutdated
        self.majorityWindow = m.MajorityWindow

        self.powLimit = m.PowLimit
        self.powTargetTimespan = m.PowTargetTimespan
        self.powTargetSpacing = m.PowTargetSpacing
        self.powAllowMinDifficultyBlocks = m.PowAllowMinDifficultyBlocks
        self.powNoRetargeting = m.PowNoRetargeting

        self.ruleChangeActivationThreshold = m.RuleChangeActivationThreshold
        self.minerConfirmationWindow = m.MinerConfirmationWindow
        self.deployments = MappingProxyType(
            {name: Deployment(**d) for name, d in m.Deployments.items()}
        )

        self.minimumChainWork = m.MinimumChainWork
        self.defaultAssumeValid = m.DefaultAssumeValid
        self.freeze()

    def difficultyAdjustmentInterval(self):
        return self.powTargetTimespan // self.powTargetSpacing


class ChainParams(Frozen):
    """
    ChainParams is the complete parameter set for one network. All attributes
    are read-only once the constructor returns.
    """

    def __init__(self, netModule):
        """
        Copy the network module's tables and verify them. A subsidy split that
        doesn't add up, a backbone address that doesn't decode, or a genesis
        block that doesn't match the module's recorded hashes or fails its
        proof of work, is fatal. The genesis block is hashed with the
        installed block hasher, see msgblock.setBlockHasher.

        Args:
            netModule (module): A network parameter module from energi.nets.
        """
        m = netModule
        self.name = m.Name
        self.dataDir = m.DataDir
        self.defaultPort = m.DefaultPort
        self.rpcPort = m.RPCPort
        self.messageStart = bytes(m.MessageStart)
        self.dnsSeeds = tuple(m.DNSSeeds)
        self.alertPubKey = m.AlertPubKey
        self.sporkPubKey = m.SporkPubKey
        self.maxTipAge = m.MaxTipAge
        self.delayGetHeadersTime = m.DelayGetHeadersTime
        self.pruneAfterHeight = m.PruneAfterHeight

        self.miningRequiresPeers = m.MiningRequiresPeers
        self.defaultConsistencyChecks = m.DefaultConsistencyChecks
        self.requireStandard = m.RequireStandard
        self.mineBlocksOnDemand = m.MineBlocksOnDemand
        self.testnetToBeDeprecatedFieldRPC = m.TestnetToBeDeprecatedFieldRPC
        self.poolMaxTransactions = m.PoolMaxTransactions
        self.fulfilledRequestExpireTime = m.FulfilledRequestExpireTime

        self.base58Prefixes = MappingProxyType(
            {
                addrlib.PUBKEY_ADDRESS: bytes(m.PubKeyHashAddrID),
                addrlib.SCRIPT_ADDRESS: bytes(m.ScriptHashAddrID),
                addrlib.SECRET_KEY: bytes(m.PrivateKeyID),
                addrlib.EXT_PUBLIC_KEY: bytes(m.HDPublicKeyID),
                addrlib.EXT_SECRET_KEY: bytes(m.HDPrivateKeyID),
            }
        )
        self.extCoinType = m.HDCoinType

        checkSubsidySplit(m)

        backboneScript = backboneScriptFor(m, self)

        self.genesis = genesis.createDefaultGenesisBlock(
            m.GenesisTime, m.GenesisNonce, m.GenesisBits, m.GenesisVersion, m.GenesisReward
        )
        checkGenesis(m, self.genesis)

        self.consensus = ConsensusParams(m, backboneScript, self.genesis.hash())
        self.checkpointData = CheckpointData(
            m.Checkpoints, m.CheckpointLastTime, m.CheckpointTxCount, m.CheckpointTxPerDay
        )
        self.freeze()
        log.debug(f"loaded {self.name} parameters, genesis {self.genesisHash()}")

    def __repr__(self):
        return f"ChainParams({self.name})"

    def genesisHash(self):
        """
        The genesis block hash in display byte order.

        Returns:
            str: The hash.
        """
        return self.consensus.hashGenesisBlock.rhex()

    def backboneAddress(self):
        """
        The address the backbone's share of the block subsidy is paid to.

        Returns:
            str: The base-58 encoded address.
        """
        return txscript.extractPkScriptAddr(self.consensus.backboneScript, self).string()


def checkSubsidySplit(netModule):
    """
    The backbone, miner and masternode shares must add up to the block subsidy.

    Args:
        netModule (module): The network parameter module.
    """
    m = netModule
    parts = m.BlockSubsidyBackbone + m.BlockSubsidyMiners + m.BlockSubsidyMasternodes
    if parts != m.BlockSubsidy:
        fatal(
            f"{m.Name}: block subsidy parts sum to {parts}, expected {m.BlockSubsidy}"
        )


def backboneScriptFor(netModule, netParams):
    """
    The output script paying the backbone address. An address that is not a
    valid P2PKH or P2SH address for the network is a broken table.

    Args:
        netModule (module): The network parameter module.
        netParams (ChainParams): The network, for its base58 prefixes.

    Returns:
        ByteArray: The backbone script.
    """
    m = netModule
    try:
        return txscript.payToAddrScript(
            addrlib.decodeAddress(m.BackboneAddress, netParams)
        )
    except EnergiError as e:
        fatal(f"{m.Name}: backbone address {m.BackboneAddress}: {e}")


def checkGenesis(netModule, block):
    """
    Verify the genesis block's proof of work and compare its hash and merkle
    root with the values recorded in the network module.

    Args:
        netModule (module): The network parameter module.
        block (MsgBlock): The genesis block built from the module's inputs.
    """
    m = netModule
    header = block.header
    try:
        pow.checkGenesisProofOfWork(header.powHash(), header.bits, m.PowLimit)
    except pow.ProofOfWorkError as e:
        fatal(f"{m.Name}: genesis block proof of work: {e}")

    blockHash = header.id()
    if blockHash != m.GenesisHash:
        fatal(f"{m.Name}: genesis hash {blockHash}, expected {m.GenesisHash}")

    merkleRoot = header.merkleRoot.rhex()
    if merkleRoot != m.GenesisMerkleRoot:
        fatal(
            f"{m.Name}: genesis merkle root {merkleRoot},"
            f" expected {m.GenesisMerkleRoot}"
        )
    log.debug(f"{m.Name}: genesis block {blockHash} verified")
