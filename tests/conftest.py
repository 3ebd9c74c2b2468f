import logging

from eth_utils import (
    DEBUG2_LEVEL_NUM,
    setup_DEBUG2_logging,
)

#
#  Setup DEBUG2 level logging.
#
# This needs to be done before the library logs anything: the extended debug
# logger decides once whether DEBUG2 is enabled.
setup_DEBUG2_logging()
logging.getLogger("compound_duration").setLevel(DEBUG2_LEVEL_NUM)
