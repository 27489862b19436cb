"""Game tree, clustering, transport and training parameters."""

# game tree parameters
N = 2
STACK = 100
B_BLIND = 2
S_BLIND = 1
MAX_RAISE_REPEATS = 3
MAX_DEPTH_SUBGAME = 16

# sinkhorn optimal transport parameters
SINKHORN_TEMPERATURE = 0.025
SINKHORN_ITERATIONS = 128
SINKHORN_TOLERANCE = 0.001

# kmeans clustering parameters
KMEANS_FLOP_TRAINING_ITERATIONS = 20
KMEANS_TURN_TRAINING_ITERATIONS = 24
KMEANS_FLOP_CLUSTER_COUNT = 128
KMEANS_TURN_CLUSTER_COUNT = 144
KMEANS_EQTY_CLUSTER_COUNT = 101

# rock-paper-scissors mccfr parameters
ASYMMETRIC_UTILITY = 2.0
CFR_BATCH_SIZE_RPS = 1
CFR_TREE_COUNT_RPS = 8192

# no-limit hold'em mccfr parameters
CFR_BATCH_SIZE_NLHE = 128
CFR_TREE_COUNT_NLHE = 0x10000000

# profile average sampling parameters
SAMPLING_THRESHOLD = 1.0
SAMPLING_ACTIVATION = 0.0
SAMPLING_EXPLORATION = 0.01

# regret matching parameters
POLICY_MIN = 1.1754944e-38
REGRET_MIN = -3e5