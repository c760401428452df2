# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os
import traceback
import sys

logging_initialized = False

FALLBACK_FORMAT =\
    "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"

def init(config_file=None):
    global logging_initialized

    if logging_initialized:
        return

    if not config_file:
        config_file = "logging.ini"

    if os.path.isfile(config_file):
        logging.config.fileConfig(config_file, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=logging.WARNING, format=FALLBACK_FORMAT)

    logging_initialized = True

def handle_exception(log, info):
    log.critical("{} threw [{}]: {}".format(\
        info, sys.exc_info()[0], str(sys.exc_info()[1])))
    traceback.print_tb(sys.exc_info()[2])
