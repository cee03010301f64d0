#!/usr/bin/env python

"""account_admin.py: local OS accounts through the WinNT:// provider."""

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
from iis_manager.Result import success, not_found, already_exists
from iis_manager.Result import external_error

def add_user_to_group(metabase, username, group_name):
    group_path = metabase.group_path(group_name)
    if not metabase.exists(group_path):
        msg = "No local group named %s" % group_name
        Logger.warning(msg)
        return not_found(msg)
    try:
        group = metabase.get_object(group_path)
        user = metabase.get_object(metabase.user_path(username))
        metabase.invoke(group, "Add", metabase.ads_path(user))
    except ExternalSubsystemError as err:
        Logger.error("Unable to add %s to %s: %s" % (username, group_name,
                                                     err.detail))
        return external_error(str(err))
    Logger.info("Added %s to group %s" % (username, group_name))
    return success("Added %s to %s" % (username, group_name))

def create_user(metabase, username, password, description):
    '''Create a local account and put it in the configured group
    (Guests unless accounts.group says otherwise). The group is
    skipped if it doesn't exist on this machine.'''
    if metabase.exists(metabase.user_path(username)):
        msg = "The account %s already exists." % username
        Logger.warning(msg)
        return already_exists(msg)
    try:
        computer = metabase.get_object(metabase.computer_path())
        user = metabase.create_child(computer, "user", username)
        metabase.invoke(user, "SetPassword", password)
        metabase.put(user, "Description", description)
        metabase.set_info(user)
    except ExternalSubsystemError as err:
        Logger.error("Unable to create user '%s'. [%s]" % (username,
                                                           err.detail))
        return external_error(str(err))
    Logger.info("Account %s created" % username)
    group_name = metabase.config.get_user_group()
    if metabase.exists(metabase.group_path(group_name)):
        result = add_user_to_group(metabase, username, group_name)
        if not result.succeeded():
            return external_error("Account %s created, but not added to "
                                  "group %s: %s" % (username, group_name,
                                                    result.message))
    return success("Account %s created" % username)

def remove_user(metabase, username):
    if not metabase.exists(metabase.user_path(username)):
        msg = "No local account named %s" % username
        Logger.warning(msg)
        return not_found(msg)
    try:
        computer = metabase.get_object(metabase.computer_path())
        metabase.delete_child(computer, "user", username)
    except ExternalSubsystemError as err:
        Logger.error("Unable to remove user %s: %s" % (username, err.detail))
        return external_error(str(err))
    Logger.info("Removed account %s" % username)
    return success("Removed account %s" % username)
