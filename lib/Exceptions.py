#!/usr/bin/env python
"Exceptions that might be encountered while administering IIS"

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

import sys

class UnsupportedPlatform(Exception):
    "Thrown when a live IIS session is requested away from Windows"
    def __init__(self):
        Exception.__init__(self)
    def __repr__(self):
        msg = "This platform cannot administer IIS: %s"
        return msg % (sys.platform)
    def __str__(self):
        return self.__repr__()

class ConfigurationException(Exception):
    "Thrown when the configuration file can't be used"
    def __init__(self, reason):
        Exception.__init__(self)
        self.reason = reason
    def __repr__(self):
        msg = "This system has a configuration error: %s"
        return msg % (self.reason)
    def __str__(self):
        return self.__repr__()

class InvalidConfigData(Exception):
    "Thrown if we are given bad configuration info."
    def __init__(self, section, t1, t2):
        Exception.__init__(self)
        self.section = section
        self.t1      = t1
        self.t2      = t2
    def __repr__(self):
        msg = "Unable to read configuration data: %s. [expected %s, got %s]"
        return msg % (self.section, self.t2, self.t1)
    def __str__(self):
        return self.__repr__()

class ExternalSubsystemError(Exception):
    "Thrown when IIS or ADSI refuses a call made on its object model"
    def __init__(self, operation, detail):
        Exception.__init__(self)
        self.operation = operation
        self.detail    = detail
    def __repr__(self):
        return "Error during %s: %s" % (self.operation, self.detail)
    def __str__(self):
        return self.__repr__()

class SiteNotFound(Exception):
    "Thrown when a website id does not match any configured site"
    def __init__(self, site_id):
        Exception.__init__(self)
        self.site_id = site_id
    def __repr__(self):
        return "Website with ID %s not found." % self.site_id
    def __str__(self):
        return self.__repr__()

class InvalidBinding(Exception):
    "Thrown when a binding isn't of the form ip:port:host"
    def __init__(self, binding):
        Exception.__init__(self)
        self.binding = binding
    def __repr__(self):
        msg = "Invalid binding information '%s' (expected ip:port:host)"
        return msg % self.binding
    def __str__(self):
        return self.__repr__()
