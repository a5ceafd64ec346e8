"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

mainnet holds the production network parameters.
"""

Name = "main"
DataDir = ""
DefaultPort = 9797
RPCPort = 9796
MessageStart = bytes((0xEC, 0x2D, 0x9A, 0xAF))
DNSSeeds = [
    ("energi.network", "dnsseed.energi.network"),
]
AlertPubKey = (
    "048cd9adbefe1ca8435de5372e2725027e56f959fb979f5252c7d2a51de2f525"
    "1c10d55ad632e8c217d086b7b517ccfa934d5af693f354a0ab58bce23c963df5fc"
)
SporkPubKey = (
    "0440122819daf62ad5de1467013d72c9b909124346c317e2411f16e5a7675ecb"
    "d543fe0a3344d940d789b9b6f3440002a5b29e694827820fd14630bb454076ef96"
)
MaxTipAge = 6 * 60 * 60  # ~144 blocks behind
DelayGetHeadersTime = 24 * 60 * 60
PruneAfterHeight = 100000

# Node behaviour
MiningRequiresPeers = True
DefaultConsistencyChecks = False
RequireStandard = True
MineBlocksOnDemand = False
TestnetToBeDeprecatedFieldRPC = False
PoolMaxTransactions = 3
FulfilledRequestExpireTime = 60 * 60  # 1 hour

# Block subsidy, 13.7 coins split between the backbone, miners and masternodes.
BlockSubsidy = 1370000000
BlockSubsidyBackbone = 228000000  # 10%
BlockSubsidyMiners = 228000000  # 10%
BlockSubsidyMasternodes = 914000000  # 40%

# The backbone's share is paid to this address. Script hash, starts with N.
BackboneAddress = "NbzG31gdadVgWxdPEYcaLsHAWQvc4An2PG"

# Treasury
SuperblockCycle = 20160  # 14 days
RegularTreasuryBudget = 18400000000000
SpecialTreasuryBudget = 400000000000000 + RegularTreasuryBudget
SpecialTreasuryBudgetBlock = SuperblockCycle * 2

# Masternodes and governance
MasternodePaymentsStartBlock = 216000
InstantSendKeepLock = 24
BudgetProposalEstablishingTime = 60 * 60 * 24  # 1 day
GovernanceMinQuorum = 7
GovernanceFilterElements = 20000
MasternodeMinimumConfirmations = 15
MajorityEnforceBlockUpgrade = 750
MajorityRejectBlockOutdated = 950
MajorityWindow = 1000

# Proof of work
PowLimit = 0xFFFFF << 216
PowTargetTimespan = 24 * 60 * 60  # 1 day
PowTargetSpacing = 60  # 1 minute
PowAllowMinDifficultyBlocks = False
PowNoRetargeting = False

# Consensus rule change deployments.
#
# The miner confirmation window is defined as:
#   target proof of work timespan / target proof of work spacing
RuleChangeActivationThreshold = 1916  # 95% of MinerConfirmationWindow
MinerConfirmationWindow = 2016
Deployments = {
    "testdummy": dict(bit=28, startTime=1199145601, timeout=1230767999),
    "csv": dict(bit=0, startTime=1486252800, timeout=1517788800),
    "dip0001": dict(
        bit=1, startTime=1508025600, timeout=1539561600, windowSize=4032, threshold=3226,
    ),
}
MinimumChainWork = 0
DefaultAssumeValid = "00" * 32

# Genesis block. The hashes are those of the Energi header hasher, which has to
# be installed with msgblock.setBlockHasher for them to verify.
GenesisTime = 1523387128
GenesisNonce = 31939856
GenesisBits = 0x1E0FFFF0
GenesisVersion = 1
GenesisReward = BlockSubsidyBackbone + BlockSubsidyMiners
GenesisHash = "7975cd2a50b7fef98190dc9668ea5254bdc6a900b0a9d867b87aada366a0ccbc"
GenesisMerkleRoot = "ce737517317ef573bb17f34c49e10fa30357983f29821f129a99fe3cb90e34c4"

# Checkpoints, height to block hash.
Checkpoints = {0: "00" * 32}
CheckpointLastTime = 0
CheckpointTxCount = 0
CheckpointTxPerDay = 0

# Address encoding magics
PubKeyHashAddrID = bytes((33,))  # starts with E
ScriptHashAddrID = bytes((53,))  # starts with N
PrivateKeyID = bytes((106,))  # starts with G

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = (0x03B8C856).to_bytes(4, byteorder="big")  # starts with npub
HDPrivateKeyID = (0xD7DC6E9F).to_bytes(4, byteorder="big")  # starts with nprv

# BIP44 coin type used in the hierarchical deterministic path for
# address generation.
HDCoinType = 5
