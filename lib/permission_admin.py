#!/usr/bin/env python

"""permission_admin.py: file-system rights for web content, granted by
running icacls."""

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

import subprocess
from iis_manager.Config import Config
from iis_manager.Logger import Logger
from iis_manager.Result import success, external_error, io_error
from iis_manager.static_data import MODIFY_GRANT

def modify_grant_command(icacls, directory, user):
    "recursive (OI)(CI) Modify grant for user on directory"
    return [icacls, directory, "/grant", MODIFY_GRANT % user, "/T"]

def set_modify_web_permissions(directory, user, config=None):
    "Let user modify everything under directory"
    if config is None:
        config = Config()
    cmd = modify_grant_command(config.get_icacls(), directory, user)
    Logger.debug("Running: %s" % ' '.join(cmd))
    try:
        process = subprocess.Popen(cmd, stdout=subprocess.PIPE,
                                   stderr=subprocess.PIPE,
                                   universal_newlines=True)
        output, error = process.communicate()
    except OSError as err:
        Logger.error("Unable to run %s: %s" % (cmd[0], err))
        return io_error(str(err))
    if process.returncode == 0:
        Logger.info("Permissions set successfully:\n%s" % output)
        return success("Granted modify on %s to %s" % (directory, user),
                       output)
    Logger.error("Error setting permissions:\n%s" % error)
    return external_error(error)
