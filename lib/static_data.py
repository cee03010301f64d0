#!/usr/bin/env python

"Holds data that is used as constants through different parts of the code."

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
from iis_manager._version import version_info

# ================================================== Statics

VERSION       = str("%(major)d.%(minor)d.%(micro)d" % version_info)
LOGS_TO_KEEP  = 5
LOG_MAX_SIZE  = 1000000
DEFAULT_LOG_LEVEL = "DEBUG"

HEADER_TEXT   = \
"""iis_manager-%s: administer IIS websites, application pools, FTP
directories and local accounts from the command line.

iis_manager comes with ABSOLUTELY NO WARRANTY; This is free software,
and you are welcome to redistribute it under the terms of the Simplified
BSD License. License terms can be found here:
http://www.opensource.org/licenses/bsd-license.php""" % VERSION

# BASIC RETURN CODES
OK        = 0
FAIL      = 1

# OPERATION RESULT KINDS
SUCCESS        = "SUCCESS"
NO_CHANGE      = "NO_CHANGE"
NOT_FOUND      = "NOT_FOUND"
ALREADY_EXISTS = "ALREADY_EXISTS"
INVALID_TARGET = "INVALID_TARGET"
EXTERNAL_ERROR = "EXTERNAL_ERROR"
IO_ERROR       = "IO_ERROR"

RESULT_KINDS = [SUCCESS, NO_CHANGE, NOT_FOUND, ALREADY_EXISTS,
                INVALID_TARGET, EXTERNAL_ERROR, IO_ERROR]
RESULT_STATUS = {SUCCESS: OK, NO_CHANGE: OK}

# RUNTIME STATES (Microsoft.Web.Administration.ObjectState)
STARTING  = "Starting"
STARTED   = "Started"
STOPPING  = "Stopping"
STOPPED   = "Stopped"
UNKNOWN   = "Unknown"

STATE_LOOKUP = {0: STARTING, 1: STARTED, 2: STOPPING, 3: STOPPED, 4: UNKNOWN}
VALID_STATES = [STARTED, STOPPED, STARTING, STOPPING, UNKNOWN]

# SENTINELS AND PLACEHOLDERS
APP_POOL_NOT_FOUND = "App Pool Name Not Found"
NOT_AVAILABLE      = "N/A"

# IIS CONFIGURATION SYSTEM
ADMIN_MANAGER_PROGID = "Microsoft.ApplicationHost.WritableAdminManager"
APPHOST_PATH         = "MACHINE/WEBROOT/APPHOST"
SITES_SECTION        = "system.applicationHost/sites"
POOLS_SECTION        = "system.applicationHost/applicationPools"
ROOT_PATH            = "/"
DEFAULT_PROTOCOL     = "http"
HTTP_PROTOCOLS       = ["http", "https"]

# LEGACY METABASE / ADSI
LOCAL_HOSTS          = ["localhost", "127.0.0.1", "."]
W3SVC_PATH           = "IIS://%s/w3svc"
SITE_PATH            = "IIS://%s/w3svc/%s"
FTP_ROOT_PATH        = "IIS://%s/MSFTPSVC/1/Root"
WINNT_COMPUTER_PATH  = "WinNT://%s,computer"
WINNT_USER_PATH      = "WinNT://%s/%s,user"
WINNT_GROUP_PATH     = "WinNT://%s/%s,group"
METABASE_PREFIX      = "IIS://"
VDIR_CLASS_SUFFIXES  = ["Server", "VirtualDir"]
POOLED_ISOLATION     = "2"
ISOLATED_ISOLATION   = "1"
DEFAULT_GROUP        = "Guests"
DEFAULT_SCRIPT_MAPS  = [r".htm,C:\Windows\Microsoft.NET\Framework"
                        r"\v4.0.30319\aspnet_isapi.dll,5,GET, HEAD, POST"]

# PERMISSIONS
ICACLS               = "icacls"
MODIFY_GRANT         = "%s:(OI)(CI)M"

# FILE NAMES

LOG_FILE      = "iis_manager.log"
CONFIG_FILE   = "config.yml"
CONFIG_ENV    = "IIS_MANAGER_CONFIG"
LOG_ENV       = "IIS_MANAGER_LOG"

if os.environ.get("PROGRAMDATA"):
    IIS_MANAGER_DIR = os.path.join(os.environ["PROGRAMDATA"], "iis_manager")
else:
    IIS_MANAGER_DIR = os.path.join(os.path.expanduser("~"), ".iis_manager")
