#!/usr/bin/env python

"""app_pool_admin.py: create, remove, start, stop and inspect IIS
application pools, and hand a pool to a site's root application."""

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
from iis_manager.mini_utility import join_names
from iis_manager.Result import success, no_change, not_found
from iis_manager.Result import already_exists, external_error
from iis_manager.static_data import STARTED, STOPPED, APP_POOL_NOT_FOUND

def create_app_pool(manager, name, version):
    '''Add a pool running managed runtime `version` (e.g. "v4.0").
    Both changes are committed together.'''
    if manager.find_application_pool(name) is not None:
        msg = "Application pool '%s' already exists" % name
        Logger.warning(msg)
        return already_exists(msg)
    try:
        app_pool = manager.add_application_pool(name)
        app_pool.managed_runtime_version = version
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error creating application pool %s: %s" % (name,
                                                                 err.detail))
        return external_error(str(err))
    Logger.info("Created application pool %s (%s)" % (name, version))
    return success("Created application pool %s" % name)

def remove_app_pool(manager, name):
    app_pool = manager.find_application_pool(name)
    if app_pool is None:
        msg = "No application pool named '%s'" % name
        Logger.warning(msg)
        return not_found(msg)
    try:
        manager.remove_application_pool(app_pool)
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error removing application pool %s: %s" % (name,
                                                                 err.detail))
        return external_error(str(err))
    Logger.info("Removed application pool %s" % name)
    return success("Removed application pool %s" % name)

def _transition(manager, name, required_state, verb):
    """Run start/stop on a pool, but only when it sits in
    required_state. Anything else (including the transitional
    states) is left alone."""
    app_pool = manager.find_application_pool(name)
    if app_pool is None:
        msg = "No application pool named '%s'" % name
        Logger.warning(msg)
        return not_found(msg)
    try:
        current_state = app_pool.state
        if current_state != required_state:
            msg = "Application pool %s is %s; not trying to %s it"
            msg = msg % (name, current_state, verb)
            Logger.info(msg)
            return no_change(msg)
        getattr(app_pool, verb)()
    except ExternalSubsystemError as err:
        Logger.error("Error trying to %s application pool %s: %s"
                     % (verb, name, err.detail))
        return external_error(str(err))
    Logger.info("Asked application pool %s to %s" % (name, verb))
    return success("Application pool %s: %s" % (name, verb))

def start_app_pool(manager, name):
    "Start a pool that is Stopped"
    return _transition(manager, name, STOPPED, "start")

def stop_app_pool(manager, name):
    "Stop a pool that is Started"
    return _transition(manager, name, STARTED, "stop")

def get_app_pool_name_list(manager):
    return join_names(manager.application_pools)

def app_pool_status(manager, name):
    "The pool's state, or APP_POOL_NOT_FOUND"
    app_pool = manager.find_application_pool(name)
    if app_pool is None:
        return APP_POOL_NOT_FOUND
    return app_pool.state

def assign_app_pool_to_site(manager, site_name, app_pool):
    "Point a site's root application at an existing pool"
    site = manager.find_site(site_name)
    if site is None:
        msg = "No site named '%s'" % site_name
        Logger.warning(msg)
        return not_found(msg)
    if manager.find_application_pool(app_pool) is None:
        msg = "No application pool named '%s'" % app_pool
        Logger.warning(msg)
        return not_found(msg)
    try:
        root = site.root_application
        root.application_pool_name = app_pool
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error assigning %s to %s: %s" % (app_pool, site_name,
                                                       err.detail))
        return external_error(str(err))
    Logger.info("Site %s now runs in application pool %s" % (site_name,
                                                            app_pool))
    return success("Assigned %s to %s" % (app_pool, site_name))
