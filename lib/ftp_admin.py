#!/usr/bin/env python

"""ftp_admin.py: per-user FTP virtual directories under the FTP
service root in the metabase."""

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

from iis_manager.Exceptions import ExternalSubsystemError
from iis_manager.Logger import Logger
from iis_manager.mini_utility import child_path, virtual_dir_class
from iis_manager.Result import success, not_found, already_exists
from iis_manager.Result import external_error

def create_ftp_dir(metabase, ftp_user, ftp_dir):
    "Give ftp_user a writable FTP directory mapped to ftp_dir"
    ftp_root = metabase.ftp_root_path()
    if metabase.exists(child_path(ftp_root, ftp_user)):
        msg = "FTP directory for %s already exists" % ftp_user
        Logger.warning(msg)
        return already_exists(msg)
    try:
        root = metabase.get_object(ftp_root)
        class_name = virtual_dir_class(metabase.schema_class(root))
        ftp_vdir = metabase.create_child(root, class_name, ftp_user)
        metabase.put(ftp_vdir, "Path", ftp_dir)
        metabase.put(ftp_vdir, "AccessWrite", True)
        metabase.set_info(ftp_vdir)
    except ExternalSubsystemError as err:
        Logger.error("FTP create error: %s" % err)
        return external_error(str(err))
    Logger.info("Created FTP directory %s -> %s" % (ftp_user, ftp_dir))
    return success("Created FTP directory for %s" % ftp_user)

def remove_ftp_dir(metabase, ftp_user):
    ftp_root = metabase.ftp_root_path()
    try:
        if not metabase.exists(child_path(ftp_root, ftp_user)):
            msg = "No FTP directory for %s" % ftp_user
            Logger.warning(msg)
            return not_found(msg)
        ftp_vdir = metabase.get_object(child_path(ftp_root, ftp_user))
        class_name = metabase.schema_class(ftp_vdir)
        root = metabase.get_object(ftp_root)
        metabase.delete_child(root, class_name, ftp_user)
    except ExternalSubsystemError as err:
        Logger.error("FTP remove error: %s" % err)
        return external_error(str(err))
    Logger.info("Removed FTP directory for %s" % ftp_user)
    return success("Removed FTP directory for %s" % ftp_user)
