#!/usr/bin/env python

'''Config.py: This class provides hierarchical configuration data,
either from a dictionary handed to it or from the config.yml file in
the iis_manager home directory.'''

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

import os
import copy
import yaml
from iis_manager.Exceptions import InvalidConfigData, ConfigurationException
from iis_manager.Logger import Logger
from iis_manager.static_data import CONFIG_FILE, CONFIG_ENV, IIS_MANAGER_DIR
from iis_manager.static_data import DEFAULT_GROUP, ICACLS, FTP_ROOT_PATH
from iis_manager.static_data import DEFAULT_SCRIPT_MAPS, DEFAULT_PROTOCOL
from iis_manager.static_data import DEFAULT_LOG_LEVEL

def get_config_path():
    "Find out where the configuration file should live"
    config_path = os.environ.get(CONFIG_ENV)
    if config_path:
        return config_path
    return os.path.join(IIS_MANAGER_DIR, CONFIG_FILE)

def load_config_file(config_path):
    '''Parse a YAML configuration file into a dictionary. A missing or
    empty file yields an empty dictionary.'''
    if not os.path.isfile(config_path):
        return {}
    Logger.debug("Reading configuration from %s" % config_path)
    with open(config_path, 'r') as file_handle:
        try:
            config_data = yaml.safe_load(file_handle)
        except yaml.YAMLError as err:
            msg = "%s is not valid YAML: %s" % (config_path, err)
            raise ConfigurationException(msg)
    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ConfigurationException("%s does not hold a dictionary"
                                     % config_path)
    return config_data

class Config(dict):
    """Settings for administrative sessions, keyed by section
    (iis, ftp, accounts, permissions, vdir, website, logging).
    Values are reached with dotted names such as 'iis.host'."""

    def __init__(self, config_data=None, config_path=None):
        '''
        config_data -- settings handed to us directly (copied)
        config_path -- YAML file read when no settings are handed to us
        '''
        dict.__init__(self)
        self.config_path = config_path
        if config_data:
            self.update(copy.deepcopy(config_data))
            return
        if not self.config_path:
            self.config_path = get_config_path()
        self.update(load_config_file(self.config_path))

    def set(self, section, option, value):
        "Store section.option, replacing a section that isn't a dictionary"
        if not isinstance(self.get(section), dict):
            self[section] = {}
        self[section][option] = value

    def lookup(self, dotted_name):
        "The value at dotted_name, or None if any part is missing"
        value = self
        for part in dotted_name.split('.'):
            if not isinstance(value, dict) or part not in value:
                return None
            value = value[part]
        return value

    def _typed(self, dotted_name, default, expected_type, optional):
        value = self.lookup(dotted_name)
        if value is None:
            if not optional:
                raise InvalidConfigData(dotted_name, None, expected_type)
            return default
        if expected_type is str and isinstance(value, (int, float)):
            value = str(value)
        if type(value) != expected_type:
            raise InvalidConfigData(dotted_name, type(value), expected_type)
        return value

    def string(self, dotted_name, default='', optional=True):
        '''
        >>> config = Config({"iis": {"host": "web01", "port": 80}})
        >>> config.string("iis.host")
        'web01'
        >>> config.string("iis.port")
        '80'
        >>> config.string("iis.site", "Default")
        'Default'
        '''
        return self._typed(dotted_name, default, str, optional)

    def integer(self, dotted_name, default=0, optional=True):
        return self._typed(dotted_name, default, int, optional)

    def boolean(self, dotted_name, default=False, optional=True):
        return self._typed(dotted_name, default, bool, optional)

    def listobj(self, dotted_name, default=None, optional=True):
        if default is None:
            default = []
        return self._typed(dotted_name, default, list, optional)

    def dictionary(self, dotted_name, default=None, optional=True):
        if default is None:
            default = {}
        return self._typed(dotted_name, default, dict, optional)

    def get_host(self):
        "The machine whose IIS we are administering"
        return self.string("iis.host", "localhost")

    def get_ftp_root(self):
        "Metabase path under which FTP directories are created"
        return self.string("ftp.root", FTP_ROOT_PATH % self.get_host())

    def get_user_group(self):
        "Local group new accounts are added to"
        return self.string("accounts.group", DEFAULT_GROUP)

    def get_icacls(self):
        return self.string("permissions.icacls", ICACLS)

    def get_script_maps(self):
        "ScriptMaps written onto new legacy virtual directories"
        return self.listobj("vdir.script_maps", list(DEFAULT_SCRIPT_MAPS))

    def get_protocol(self):
        "Protocol of the binding created with a new website"
        return self.string("website.protocol", DEFAULT_PROTOCOL)

    def get_log_level(self):
        return self.string("logging.level", DEFAULT_LOG_LEVEL).upper()

    def get_log_path(self):
        "None means: keep logging where we already are"
        return self.string("logging.path", None)

if __name__ == "__main__":
    import doctest
    doctest.testmod()
