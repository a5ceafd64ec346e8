"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

regtest holds the regression test network parameters. Blocks can be mined
on demand at the minimum difficulty.
"""

Name = "regtest"
DataDir = "regtest"
DefaultPort = 39797
RPCPort = 39796
MessageStart = bytes((0xEF, 0x89, 0x6C, 0x7F))
DNSSeeds = []
AlertPubKey = ""
SporkPubKey = (
    "044221353eb05b321b55f9b47dc90462066d6e09019e95b05d6603a117877fd3"
    "4b13b34e8ed005379a9553ce7e719c44c658fd9c9acaae58a04c63cb8f7b5716db"
)
MaxTipAge = 6 * 60 * 60
DelayGetHeadersTime = 0  # never delay GETHEADERS
PruneAfterHeight = 1000

# Node behaviour
MiningRequiresPeers = False
DefaultConsistencyChecks = True
RequireStandard = False
MineBlocksOnDemand = True
TestnetToBeDeprecatedFieldRPC = False
PoolMaxTransactions = 3
FulfilledRequestExpireTime = 5 * 60

BlockSubsidy = 1370000000
BlockSubsidyBackbone = 228000000
BlockSubsidyMiners = 228000000
BlockSubsidyMasternodes = 914000000

# Script hash, starts with 8.
BackboneAddress = "8vhBCpCPqA3oPAZTJ9d3XZumjCY1GVb2Yq"

# Treasury
SuperblockCycle = 60
RegularTreasuryBudget = 18400000000000
SpecialTreasuryBudget = 400000000000000 + RegularTreasuryBudget
SpecialTreasuryBudgetBlock = SuperblockCycle * 50

# Masternodes and governance
MasternodePaymentsStartBlock = 240
InstantSendKeepLock = 6
BudgetProposalEstablishingTime = 60 * 20
GovernanceMinQuorum = 1
GovernanceFilterElements = 100
MasternodeMinimumConfirmations = 1
MajorityEnforceBlockUpgrade = 750
MajorityRejectBlockOutdated = 950
MajorityWindow = 1000

# Proof of work
PowLimit = (1 << 255) - 1
PowTargetTimespan = 24 * 60 * 60
PowTargetSpacing = 60
PowAllowMinDifficultyBlocks = True
PowNoRetargeting = True

RuleChangeActivationThreshold = 108  # 75% of MinerConfirmationWindow
MinerConfirmationWindow = 144
Deployments = {
    "testdummy": dict(bit=28, startTime=0, timeout=999999999999),
    "csv": dict(bit=0, startTime=0, timeout=999999999999),
    "dip0001": dict(bit=1, startTime=0, timeout=999999999999),
}
MinimumChainWork = 0
DefaultAssumeValid = "00" * 32

# Genesis block. See mainnet.
GenesisTime = 1523390593
GenesisNonce = 5
GenesisBits = 0x207FFFFF
GenesisVersion = 1
GenesisReward = BlockSubsidyBackbone + BlockSubsidyMiners
GenesisHash = "625761eaffc2d17a6b7e0f805e4908d22469e079352da0537c8cbe93c30bbf59"
GenesisMerkleRoot = "34e077f3b96691e4f1aea04061ead361fc4f5b45250513199f46f352b7e4669e"

Checkpoints = {0: "440cbbe939adba25e9e41b976d3daf8fb46b5f6ac0967b0a9ed06a749e7cf1e2"}
CheckpointLastTime = 0
CheckpointTxCount = 0
CheckpointTxPerDay = 0

# Address encoding magics
PubKeyHashAddrID = bytes((127,))
ScriptHashAddrID = bytes((19,))
PrivateKeyID = bytes((239,))

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = (0x043587CF).to_bytes(4, byteorder="big")
HDPrivateKeyID = (0x04358394).to_bytes(4, byteorder="big")

HDCoinType = 1
