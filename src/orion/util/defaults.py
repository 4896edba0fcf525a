# -*- coding: utf-8 -*-

DEFAULT_HOST_ADDR = "127.0.0.1"
DEFAULT_PORT = 8860
DEFAULT_RETRIES = 3  # Number of times to retry a failed req operation
DEFAULT_TIMEOUT = 5  # seconds
DEFAULT_LOGLEVEL = "WARNING"
TEST_LOGLEVEL = "TRACE"
SINGLE_LINE_ERR_LOG = False  # reformat tracebacks into a single line for err comms

DEFAULT_DATA_PATH = "/tmp/data"
DATA_PATH_ENVVAR = "ORION_DATA_PATH"
DATA_FILENAME = "data.txt"
FLAT_FILE_EXT = ".txt"
