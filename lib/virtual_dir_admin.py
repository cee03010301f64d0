#!/usr/bin/env python

"""virtual_dir_admin.py: virtual applications and directories. New
applications go through the IIS configuration system; create_vdir and
assign_vdir_to_app_pool talk to the legacy metabase, addressed as
IIS://<servername>/<service>/<siteID>/Root[/<vdir>]."""

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

from iis_manager.Exceptions import ExternalSubsystemError, SiteNotFound
from iis_manager.Logger import Logger
from iis_manager.mini_utility import can_hold_virtual_dirs, virtual_dir_class
from iis_manager.mini_utility import metabase_app_root
from iis_manager.projections import path_listing_document
from iis_manager.Result import success, not_found, already_exists
from iis_manager.Result import invalid_target, external_error
from iis_manager.static_data import ISOLATED_ISOLATION, POOLED_ISOLATION

def _find_site(manager, site_key):
    "site_key is a site name or, failing that, a numeric site id"
    site = manager.find_site(str(site_key))
    if site is None and str(site_key).isdigit():
        site = manager.find_site_by_id(int(site_key))
    return site

def create_vapp(manager, site_key, dir_path, dir_name, app_pool):
    '''Add application /dir_name, mapped to dir_path, to a site and run
    it in app_pool.'''
    site = _find_site(manager, site_key)
    if site is None:
        msg = "No site named or numbered '%s'" % site_key
        Logger.warning(msg)
        return not_found(msg)
    app_path = "/" + dir_name
    if site.find_application(app_path) is not None:
        msg = "Site %s already has an application at %s" % (site_key, app_path)
        Logger.warning(msg)
        return already_exists(msg)
    try:
        application = site.add_application(app_path, dir_path)
        application.application_pool_name = app_pool
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error creating application %s: %s" % (app_path,
                                                            err.detail))
        return external_error(str(err))
    Logger.info("Created application %s -> %s in pool %s" % (app_path,
                                                            dir_path, app_pool))
    return success("Created application %s" % app_path)

def _open_vdir_parent(metabase, metabase_path):
    """Bind to a metabase node and make sure it is a site or virtual
    directory. Returns (node, class_name, None) or (None, None, result)"""
    node = metabase.get_object(metabase_path)
    class_name = metabase.schema_class(node)
    if not can_hold_virtual_dirs(class_name):
        msg = "%s is a %s; only site and virtual directory nodes qualify"
        msg = msg % (metabase_path, class_name)
        Logger.error(msg)
        return None, None, invalid_target(msg)
    return node, class_name, None

def create_vdir(metabase, metabase_path, vdir_name, physical_path,
                app_pool_id):
    '''
    metabase_path -- e.g. "IIS://localhost/W3SVC/1/Root"
    vdir_name -- e.g. "MyNewVDir"
    physical_path -- e.g. "C:\\Inetpub\\Wwwroot"
    '''
    Logger.info("Creating virtual directory %s/%s, mapping the Root "
                "application to %s" % (metabase_path, vdir_name, physical_path))
    script_maps = metabase.config.get_script_maps()
    try:
        parent, class_name, failure = _open_vdir_parent(metabase, metabase_path)
        if failure:
            return failure
        new_vdir = metabase.create_child(parent, virtual_dir_class(class_name),
                                         vdir_name)
        settings = [("ScriptMaps", script_maps),
                    ("AppPoolId", app_pool_id),
                    ("Path", physical_path),
                    ("AccessScript", True),
                    ("AppFriendlyName", vdir_name),
                    ("AppIsolated", ISOLATED_ISOLATION),
                    ("AppRoot", metabase_app_root(metabase_path))]
        for property_name, value in settings:
            metabase.put(new_vdir, property_name, value)
        metabase.set_info(new_vdir)
    except ExternalSubsystemError as err:
        Logger.error("Failed in create_vdir: %s" % err)
        return external_error(str(err))
    Logger.info("Created virtual directory %s/%s" % (metabase_path, vdir_name))
    return success("Created virtual directory %s" % vdir_name)

def assign_vdir_to_app_pool(metabase, metabase_path, app_pool_name):
    "metabase_path -- e.g. IIS://localhost/W3SVC/1/Root/MyVDir"
    Logger.info("Assigning application %s to the application pool named %s"
                % (metabase_path, app_pool_name))
    try:
        vdir, class_name, failure = _open_vdir_parent(metabase, metabase_path)
        if failure:
            return failure
        metabase.invoke(vdir, "AppCreate3", 0, app_pool_name, True)
        metabase.put(vdir, "AppIsolated", POOLED_ISOLATION)
        metabase.set_info(vdir)
    except ExternalSubsystemError as err:
        Logger.error("Failed in assign_vdir_to_app_pool: %s" % err)
        return external_error(str(err))
    Logger.info("%s now runs in %s" % (metabase_path, app_pool_name))
    return success("Assigned %s to %s" % (metabase_path, app_pool_name))

def _site_by_id(manager, site_id):
    site = manager.find_site_by_id(site_id)
    if site is None:
        raise SiteNotFound(site_id)
    return site

def get_virtual_directories_xml(manager, site_id):
    "Every virtual directory of every application of the site"
    site = _site_by_id(manager, site_id)
    entries = []
    for application in site.applications:
        for vdir in application.virtual_directories:
            entries.append((vdir.path, vdir.physical_path))
    return path_listing_document("VirtualDirectories", "VirtualDirectory",
                                 "Name", entries)

def get_virtual_applications_xml(manager, site_id):
    "Every application of the site with its root physical path"
    site = _site_by_id(manager, site_id)
    entries = []
    for application in site.applications:
        physical_path = application.virtual_directories[0].physical_path
        entries.append((application.path, physical_path))
    return path_listing_document("VirtualApplications", "Application",
                                 "Path", entries)
