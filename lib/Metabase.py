#!/usr/bin/env python

"""Metabase.py: wraps the legacy ADSI directory objects (the IIS://
metabase and the WinNT:// account store). Every call goes through here
so that unit tests can replace the object model with mocks."""

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

from iis_manager.com_support import com_guard, get_object
from iis_manager.Config import Config
from iis_manager.Exceptions import ExternalSubsystemError
from iis_manager.static_data import W3SVC_PATH, SITE_PATH
from iis_manager.static_data import WINNT_COMPUTER_PATH, WINNT_USER_PATH
from iis_manager.static_data import WINNT_GROUP_PATH

class Metabase:

    """Hands out ADSI objects by path and performs the handful of
    IADs calls (Create, Delete, Put, SetInfo) the administrative
    functions need."""

    def __init__(self, config=None, object_getter=None):
        '''
        config -- a Config; iis.host and ftp.root are used
        object_getter -- callable mapping an ADSI path to an object
        '''
        if config is None:
            config = Config()
        self.config = config
        self.host = config.get_host()
        self.object_getter = object_getter
        if self.object_getter is None:
            self.object_getter = get_object

    @com_guard("binding to directory object")
    def get_object(self, path):
        return self.object_getter(path)

    def exists(self, path):
        try:
            self.get_object(path)
        except ExternalSubsystemError:
            return False
        return True

    def w3svc_path(self):
        return W3SVC_PATH % self.host

    def site_path(self, site_id):
        return SITE_PATH % (self.host, site_id)

    def ftp_root_path(self):
        return self.config.get_ftp_root()

    def computer_path(self):
        return WINNT_COMPUTER_PATH % self.host

    def user_path(self, username):
        return WINNT_USER_PATH % (self.host, username)

    def group_path(self, group_name):
        return WINNT_GROUP_PATH % (self.host, group_name)

    @com_guard("reading schema class")
    def schema_class(self, adsi_object):
        return str(adsi_object.Class)

    @com_guard("reading ADsPath")
    def ads_path(self, adsi_object):
        return str(adsi_object.ADsPath)

    @com_guard("creating directory object")
    def create_child(self, parent, class_name, name):
        return parent.Create(class_name, name)

    @com_guard("deleting directory object")
    def delete_child(self, parent, class_name, name):
        parent.Delete(class_name, name)

    @com_guard("reading directory property")
    def get(self, adsi_object, property_name):
        return adsi_object.Get(property_name)

    @com_guard("writing directory property")
    def put(self, adsi_object, property_name, value):
        adsi_object.Put(property_name, value)

    @com_guard("committing directory object")
    def set_info(self, adsi_object):
        adsi_object.SetInfo()

    @com_guard("invoking directory method")
    def invoke(self, adsi_object, method_name, *args):
        return getattr(adsi_object, method_name)(*args)
