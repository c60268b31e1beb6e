ARG1_TAG = "e1"
ARG2_TAG = "e2"
EN_START_TEMPLATE = "<{}>"
EN_END_TEMPLATE = "</{}>"

DEFAULT_CONTEXT_SIZE = 2
REGION_SEP = "|"
SNIPPET_TEMPLATE = "{}|{}"

# span ordering policy
PERMISSIVE = "permissive"
STRICT = "strict"
SPAN_ORDER_POLICIES = {PERMISSIVE, STRICT}

# snippet modes
TOKENS_MODE = "tokens"
REGIONS_MODE = "regions"
SNIPPET_MODES = {TOKENS_MODE, REGIONS_MODE}

# relation labels
CONTAINS_CATEGORY = "CONTAINS"
CONTAINS_LABEL = "contains"
CONTAINS_REVERSE_LABEL = "contains-1"
NON_RELATION_TAG = "none"
EVENT_TYPES = ("EVENT",)

# negative down-sampling during training
NEGATIVE_DROP_RATE = 0.5
DEFAULT_SEED = 0

# THYME patient splits: patient id % 8
PATIENT_SET_MODULUS = 8
TRAIN_REMAINDERS = (0, 1, 2, 3)
DEV_REMAINDERS = (4, 5)
TEST_REMAINDERS = (6, 7)
PATIENT_FILE_PREFIX = "ID{:03d}"

BRAT_TEXT_EXT = ".txt"
BRAT_ANN_EXT = ".ann"

# change VERSION if any major updates
VERSION = "0.1"
ARGS_FILE_NAME = "printer_arguments.json"
