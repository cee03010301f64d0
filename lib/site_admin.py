#!/usr/bin/env python

"""site_admin.py: create, remove and list IIS websites. Sites are
handled through the IIS configuration system (ServerManager), except
for start_website and add_host_header, which use the legacy metabase."""

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

from iis_manager.Exceptions import ExternalSubsystemError, InvalidBinding
from iis_manager.Logger import Logger
from iis_manager.mini_utility import join_names, parse_binding, is_http_protocol
from iis_manager.projections import website_list_document, DataTable
from iis_manager.Result import success, not_found, already_exists
from iis_manager.Result import invalid_target, external_error
from iis_manager.static_data import UNKNOWN, NOT_AVAILABLE

WEBSITE_COLUMNS = ["Name", "ID", "State", "PhysicalPath", "Bindings"]

def create_website(manager, name, binding_information, physical_path, app_pool):
    '''Create a site with one binding and hand its root application to
    app_pool. An existing site of the same name is left alone.
    manager -- a ServerManager
    binding_information -- "ip:port:host", e.g. "*:80:www.example.com"
    '''
    if manager.find_site(name) is not None:
        msg = "A site with the name '%s' already exists." % name
        Logger.warning(msg)
        return already_exists(msg)
    protocol = manager.config.get_protocol()
    if is_http_protocol(protocol):
        try:
            parse_binding(binding_information)
        except InvalidBinding as err:
            Logger.error(str(err))
            return invalid_target(str(err))
    try:
        site = manager.add_site(name, protocol, binding_information,
                                physical_path)
        site.root_application.application_pool_name = app_pool
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error creating website %s: %s" % (name, err.detail))
        return external_error(str(err))
    msg = "Website '%s' created with %s binding %s" % (name, protocol,
                                                    binding_information)
    Logger.info(msg)
    return success(msg)

def remove_site(manager, name):
    "Remove a site by name"
    site = manager.find_site(name)
    if site is None:
        msg = "No site named '%s'" % name
        Logger.warning(msg)
        return not_found(msg)
    try:
        manager.remove_site(site)
        manager.commit_changes()
    except ExternalSubsystemError as err:
        Logger.error("Error removing website %s: %s" % (name, err.detail))
        return external_error(str(err))
    Logger.info("Removed website %s" % name)
    return success("Removed website %s" % name)

def start_website(metabase, server_comment, server_bindings, home_directory,
                  app_pool=None):
    '''Create a site through IIsWebService.CreateNewSite and start it.
    server_bindings -- ":port:hostname" style binding
    Returns the new site id as the result value.'''
    Logger.info("Creating site '%s' (%s) in %s" % (server_comment,
                                                 server_bindings,
                                                 home_directory))
    try:
        w3svc = metabase.get_object(metabase.w3svc_path())
        site_id = metabase.invoke(w3svc, "CreateNewSite", server_comment,
                                  [server_bindings], home_directory)
        if app_pool:
            root = metabase.get_object("%s/Root" % metabase.site_path(site_id))
            metabase.put(root, "AppPoolId", app_pool)
            metabase.set_info(root)
        website = metabase.get_object(metabase.site_path(site_id))
        metabase.invoke(website, "Start")
    except ExternalSubsystemError as err:
        Logger.error("Error creating website %s: %s" % (server_comment,
                                                        err.detail))
        return external_error(str(err))
    Logger.info("Started website %s (id %s)" % (server_comment, site_id))
    return success("Started website %s" % server_comment, site_id)

def add_host_header(metabase, host_header, website_id, web_port=80):
    "Append :port:host_header to a site's ServerBindings"
    new_binding = ":%s:%s" % (web_port, host_header)
    try:
        site = metabase.get_object(metabase.site_path(website_id))
        bindings = list(metabase.get(site, "ServerBindings") or [])
        if new_binding in bindings:
            msg = "Site %s already answers to %s" % (website_id, new_binding)
            Logger.info(msg)
            return already_exists(msg)
        bindings.append(new_binding)
        metabase.put(site, "ServerBindings", bindings)
        metabase.set_info(site)
    except ExternalSubsystemError as err:
        Logger.error("Error adding host header to site %s: %s" % (website_id,
                                                                   err.detail))
        return external_error(str(err))
    Logger.info("Added binding %s to site %s" % (new_binding, website_id))
    return success("Added binding %s" % new_binding)

def get_website_name_list(manager):
    "All site names, comma separated"
    return join_names(manager.sites)

def _site_state(site):
    try:
        return site.state
    except ExternalSubsystemError:
        return UNKNOWN

def get_website_list_xml(manager):
    '''<newDataSet><Table><set> per site, holding name, id, state,
    bindings and physicalPath. A site whose details can't be read gets
    "Unknown" for them; the rest of the listing carries on.'''
    rows = []
    for site in manager.sites:
        row = {"name": site.name, "id": site.id, "state": _site_state(site)}
        try:
            row["bindings"] = ','.join([binding.binding_information
                                        for binding in site.bindings])
        except ExternalSubsystemError as err:
            Logger.warning("Can't read bindings of %s: %s" % (row["name"],
                                                              err.detail))
            row["bindings"] = UNKNOWN
        try:
            row["physicalPath"] = site.physical_path
        except (ExternalSubsystemError, AttributeError, IndexError):
            row["physicalPath"] = UNKNOWN
        rows.append(row)
    return website_list_document(rows)

def get_websites_info(manager):
    "Name, ID, State, PhysicalPath and Bindings of every site as a DataTable"
    table = DataTable("Website", WEBSITE_COLUMNS)
    for site in manager.sites:
        name = site.name
        physical_path = NOT_AVAILABLE
        bindings = NOT_AVAILABLE
        try:
            physical_path = site.physical_path or NOT_AVAILABLE
            bindings = ', '.join([binding.url() for binding in site.bindings])
        except (ExternalSubsystemError, InvalidBinding,
                AttributeError, IndexError) as err:
            Logger.warning("Error accessing site properties for %s: %s"
                           % (name, err))
        table.add_row(name, str(site.id), _site_state(site),
                      physical_path, bindings)
    return table
