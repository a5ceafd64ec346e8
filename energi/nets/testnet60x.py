"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

testnet60x holds the parameters of the accelerated test network. Block
rewards and treasury budgets are scaled up 60 times.
"""

Name = "test60"
DataDir = "testnet60x1"
DefaultPort = 29797
RPCPort = 29796
MessageStart = bytes((0xD9, 0x2A, 0xAB, 0x60))
DNSSeeds = [
    ("test60x.energi.network", "dnsseed.test60x.energi.network"),
]
AlertPubKey = (
    "04da7109a0215bf7bb19ecaf9e4295104142b4e03579473c1083ad44e8195a13"
    "394a8a7e51ca223fdbc5439420fd08963e491007beab68ac65c5b1c842c8635b37"
)
SporkPubKey = (
    "044221353eb05b321b55f9b47dc90462066d6e09019e95b05d6603a117877fd3"
    "4b13b34e8ed005379a9553ce7e719c44c658fd9c9acaae58a04c63cb8f7b5716db"
)
MaxTipAge = 0x7FFFFFFF  # allow mining on top of old blocks
DelayGetHeadersTime = 24 * 60 * 60
PruneAfterHeight = 1000

# Node behaviour
MiningRequiresPeers = False
DefaultConsistencyChecks = False
RequireStandard = False
MineBlocksOnDemand = False
TestnetToBeDeprecatedFieldRPC = True
PoolMaxTransactions = 3
FulfilledRequestExpireTime = 5 * 60  # 5 minutes

BlockSubsidy = 1370000000 * 60
BlockSubsidyBackbone = 228000000 * 60
BlockSubsidyMiners = 228000000 * 60
BlockSubsidyMasternodes = 914000000 * 60

# Pubkey hash, starts with t.
BackboneAddress = "tA61JveN6y2kej9kYNK9tKvVuUgAvgaC6X"

# Treasury
SuperblockCycle = 60
RegularTreasuryBudget = 18400000000000 * 60
SpecialTreasuryBudget = (400000000000000 + RegularTreasuryBudget) * 60
SpecialTreasuryBudgetBlock = SuperblockCycle * 50

# Masternodes and governance
MasternodePaymentsStartBlock = 216000 // 60
InstantSendKeepLock = 6
BudgetProposalEstablishingTime = 60 * 20
GovernanceMinQuorum = 1
GovernanceFilterElements = 500
MasternodeMinimumConfirmations = 1
MajorityEnforceBlockUpgrade = 51
MajorityRejectBlockOutdated = 75
MajorityWindow = 100

# Proof of work
PowLimit = 0xFFFFF << 216
PowTargetTimespan = 24 * 60 * 60
PowTargetSpacing = 60
PowAllowMinDifficultyBlocks = True
PowNoRetargeting = False

RuleChangeActivationThreshold = 1512  # 75% for test chains
MinerConfirmationWindow = 2016
Deployments = {
    "testdummy": dict(bit=28, startTime=1199145601, timeout=1230767999),
    "csv": dict(bit=0, startTime=1486252800, timeout=1517788800),
}
MinimumChainWork = 0
DefaultAssumeValid = "00" * 32

# Genesis block. See mainnet.
GenesisTime = 1523394408
GenesisNonce = 44823621
GenesisBits = 0x1E0FFFF0
GenesisVersion = 1
GenesisReward = BlockSubsidyBackbone + BlockSubsidyMiners
GenesisHash = "1373246785c644330d0519fa7e50ee53afad8ce68c0e88f2eea3bd9c11a9411d"
GenesisMerkleRoot = "1ee1b1a8bfb343ed27c4a5974a552adf1c22da7551a3a4f595aeb888b31b5a05"

Checkpoints = {0: "440cbbe939adba25e9e41b976d3daf8fb46b5f6ac0967b0a9ed06a749e7cf1e2"}
CheckpointLastTime = 0
CheckpointTxCount = 0
CheckpointTxPerDay = 0

# Address encoding magics
PubKeyHashAddrID = bytes((127,))  # starts with t
ScriptHashAddrID = bytes((19,))  # starts with 8 or 9
PrivateKeyID = bytes((239,))  # starts with 9 or c

# BIP32 hierarchical deterministic extended key magics
HDPublicKeyID = (0x043587CF).to_bytes(4, byteorder="big")  # starts with tpub
HDPrivateKeyID = (0x04358394).to_bytes(4, byteorder="big")  # starts with tprv

HDCoinType = 1
