#!/usr/bin/env python

"""Logging for iis_manager: one log file, cycled by hand, with an
optional echo to standard error."""

# Copyright (C) 2005-2011 Peter Banka, Shawn Sherwood

# BSD License
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
# * Neither the name of the GE Security nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

import logging, sys, os
from iis_manager.Exceptions import InvalidConfigData
from iis_manager.static_data import LOG_MAX_SIZE, LOGS_TO_KEEP
from iis_manager.static_data import LOG_FILE, LOG_ENV, IIS_MANAGER_DIR

FORMAT_STRING = '%(asctime)s|%(levelname)s|%(message)s|'
LOGGER_NAME = "iis_manager"

def get_log_path():
    "Find out where the log file should live"
    log_path = os.environ.get(LOG_ENV)
    if log_path:
        return log_path
    return os.path.join(IIS_MANAGER_DIR, LOG_FILE)

def log_is_full(log_path):
    return os.path.isfile(log_path) and os.path.getsize(log_path) > LOG_MAX_SIZE

def cycle_log(log_path):
    """Windows keeps a log open while anything writes to it, so the
    rotating handlers can't be used. Shift log -> log.1 -> ... -> log.N
    ourselves before the file is opened; log.N falls off the end."""
    for index in range(LOGS_TO_KEEP, 0, -1):
        older = "%s.%d" % (log_path, index)
        if index == 1:
            newer = log_path
        else:
            newer = "%s.%d" % (log_path, index - 1)
        if not os.path.isfile(newer):
            continue
        if os.path.isfile(older):
            os.remove(older)
        os.rename(newer, older)

def open_handler(log_path):
    "A handler writing to log_path, or to stderr if that file can't be used"
    try:
        log_dir = os.path.dirname(log_path)
        if log_dir and not os.path.isdir(log_dir):
            os.makedirs(log_dir)
        if log_is_full(log_path):
            cycle_log(log_path)
        return logging.FileHandler(log_path)
    except OSError as err:
        sys.stderr.write("Unable to log to %s (%s)\n" % (log_path, err))
        return logging.StreamHandler(sys.stderr)

class LoggerClass:

    """Wraps the 'iis_manager' logger. There is one file handler,
    which configure() can move, and an optional stderr handler for
    the command line."""

    def __init__(self, log_path=None):
        self.python_logger = logging.getLogger(LOGGER_NAME)
        self.python_logger.setLevel(logging.DEBUG)
        self.formatter = logging.Formatter(FORMAT_STRING)
        self.std_err_handler = None
        self.file_handler = None
        self.log_path = None
        if log_path is None:
            log_path = get_log_path()
        self.use_file(log_path)

    def _attach(self, handler):
        handler.setFormatter(self.formatter)
        self.python_logger.addHandler(handler)
        return handler

    def _detach(self, handler):
        self.python_logger.removeHandler(handler)
        handler.close()

    def use_file(self, log_path):
        "Send file logging to log_path from now on"
        if self.file_handler:
            self._detach(self.file_handler)
        self.log_path = log_path
        self.file_handler = self._attach(open_handler(log_path))

    def configure(self, config):
        "Apply the logging.path and logging.level settings of a Config"
        log_path = config.get_log_path()
        if log_path and log_path != self.log_path:
            self.use_file(log_path)
        level_name = config.get_log_level()
        level = getattr(logging, level_name, None)
        if type(level) != type(0):
            raise InvalidConfigData("logging.level", level_name,
                                    "a logging level name")
        self.python_logger.setLevel(level)

    def info(self, msg):
        self.python_logger.info(msg)

    def debug(self, msg):
        self.python_logger.debug(msg)

    def warning(self, msg):
        self.python_logger.warning(msg)

    def error(self, msg):
        self.python_logger.error(msg)

    def critical(self, msg):
        self.python_logger.critical(msg)

    def add_std_err_logging(self):
        "Echo everything to stderr as well (once)"
        if not self.std_err_handler:
            self.std_err_handler = self._attach(logging.StreamHandler(sys.stderr))

    def rm_file_logging(self):
        if not self.file_handler:
            self.warning("No file logging to remove")
            return
        self.info("No longer logging to %s" % self.log_path)
        self._detach(self.file_handler)
        self.file_handler = None

    def rm_std_err_logging(self):
        if not self.std_err_handler:
            self.warning("No stderr logging to remove")
            return
        self._detach(self.std_err_handler)
        self.std_err_handler = None

Logger = LoggerClass()
