STORE_DIR_NAME = ".visitledger"
STORE_DATA_DIR = "store"
STORE_DIR_ENV_VAR = "VISITLEDGER_STORE_DIR"
