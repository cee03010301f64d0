#!/usr/bin/env python

"""command_line.py: the iis_admin command. Every administrative
function is reachable as one option plus its positional arguments;
results and listings go to stdout, logging goes to stderr."""

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

import sys, optparse, getpass

from iis_manager import site_admin, app_pool_admin, virtual_dir_admin
from iis_manager import ftp_admin, account_admin, permission_admin
from iis_manager import IIS_MANAGER_VERSION
from iis_manager.Config import Config
from iis_manager.Exceptions import ExternalSubsystemError, SiteNotFound
from iis_manager.Exceptions import UnsupportedPlatform, ConfigurationException
from iis_manager.Exceptions import InvalidConfigData
from iis_manager.Logger import Logger
from iis_manager.Metabase import Metabase
from iis_manager.projections import DataTable
from iis_manager.Result import OperationResult
from iis_manager.ServerManager import ServerManager
from iis_manager.static_data import OK, FAIL, HEADER_TEXT

MANAGER  = "manager"
METABASE = "metabase"
NO_SESSION = "none"

# option -> (function, session type, argument names, help)
ACTIONS = {
    "create-site": (site_admin.create_website, MANAGER,
                    ["NAME", "BINDING", "PHYSICAL-PATH", "APP-POOL"],
                    "create a website"),
    "remove-site": (site_admin.remove_site, MANAGER, ["NAME"],
                    "remove a website"),
    "start-site": (site_admin.start_website, METABASE,
                   ["COMMENT", "BINDING", "HOME-DIRECTORY", "APP-POOL"],
                   "create and start a website through the metabase"),
    "add-host-header": (site_admin.add_host_header, METABASE,
                        ["HOST-HEADER", "SITE-ID"],
                        "add a :80:HOST-HEADER binding to a site"),
    "list-sites": (site_admin.get_website_name_list, MANAGER, [],
                   "list website names"),
    "sites-xml": (site_admin.get_website_list_xml, MANAGER, [],
                  "describe all websites as XML"),
    "sites-info": (site_admin.get_websites_info, MANAGER, [],
                   "describe all websites as a table"),
    "create-pool": (app_pool_admin.create_app_pool, MANAGER,
                    ["NAME", "RUNTIME-VERSION"], "create an application pool"),
    "remove-pool": (app_pool_admin.remove_app_pool, MANAGER, ["NAME"],
                    "remove an application pool"),
    "start-pool": (app_pool_admin.start_app_pool, MANAGER, ["NAME"],
                   "start a stopped application pool"),
    "stop-pool": (app_pool_admin.stop_app_pool, MANAGER, ["NAME"],
                  "stop a started application pool"),
    "list-pools": (app_pool_admin.get_app_pool_name_list, MANAGER, [],
                   "list application pool names"),
    "pool-status": (app_pool_admin.app_pool_status, MANAGER, ["NAME"],
                    "show the state of an application pool"),
    "assign-pool": (app_pool_admin.assign_app_pool_to_site, MANAGER,
                    ["SITE-NAME", "APP-POOL"],
                    "run a site's root application in a pool"),
    "create-vapp": (virtual_dir_admin.create_vapp, MANAGER,
                    ["SITE", "PHYSICAL-PATH", "NAME", "APP-POOL"],
                    "create a virtual application"),
    "create-vdir": (virtual_dir_admin.create_vdir, METABASE,
                    ["METABASE-PATH", "NAME", "PHYSICAL-PATH", "APP-POOL"],
                    "create a virtual directory through the metabase"),
    "assign-vdir": (virtual_dir_admin.assign_vdir_to_app_pool, METABASE,
                    ["METABASE-PATH", "APP-POOL"],
                    "run a metabase virtual directory in a pool"),
    "vdirs-xml": (virtual_dir_admin.get_virtual_directories_xml, MANAGER,
                  ["SITE-ID"], "describe a site's virtual directories"),
    "vapps-xml": (virtual_dir_admin.get_virtual_applications_xml, MANAGER,
                  ["SITE-ID"], "describe a site's applications"),
    "create-ftp": (ftp_admin.create_ftp_dir, METABASE, ["USER", "DIRECTORY"],
                   "create an FTP directory for a user"),
    "remove-ftp": (ftp_admin.remove_ftp_dir, METABASE, ["USER"],
                   "remove a user's FTP directory"),
    "create-user": (account_admin.create_user, METABASE,
                    ["USER", "PASSWORD", "DESCRIPTION"],
                    "create a local account (PASSWORD '-' prompts)"),
    "remove-user": (account_admin.remove_user, METABASE, ["USER"],
                    "remove a local account"),
    "add-to-group": (account_admin.add_user_to_group, METABASE,
                     ["USER", "GROUP"], "add a local account to a group"),
    "grant-modify": (permission_admin.set_modify_web_permissions, NO_SESSION,
                     ["DIRECTORY", "USER"],
                     "grant a user recursive modify rights"),
}

USAGE  = ["usage: %prog [ -C CONFIG ] [ -H HOST ] --ACTION [ ARGUMENT ... ]"]
USAGE += ['']
for action_name in sorted(ACTIONS):
    USAGE += ["  --%-16s %s" % (action_name, ' '.join(ACTIONS[action_name][2]))]

def exit_with_return_code(value):
    "Leave with OK or FAIL"
    if type(value) != type(0):
        Logger.error("Invalid exit code, not an integer: %s" % value)
        value = FAIL
    sys.exit(value)

def open_session(session_type, config):
    if session_type == MANAGER:
        return ServerManager(config)
    if session_type == METABASE:
        return Metabase(config)
    return None

def render(output):
    "Turn whatever an administrative function returned into text"
    if isinstance(output, DataTable):
        return output.to_yaml()
    return str(output)

def run_action(action_name, args, config, session=None):
    '''Call an administrative function and print what it says.
    Returns OK or FAIL.'''
    function, session_type, arg_names, _help = ACTIONS[action_name]
    if session is None:
        session = open_session(session_type, config)
    if action_name == "create-user" and args[1] == '-':
        args = [args[0], getpass.getpass("Password for %s: " % args[0]), args[2]]
    if session_type == NO_SESSION:
        output = function(*args, config=config)
    else:
        output = function(session, *args)
    print(render(output))
    if isinstance(output, OperationResult):
        return output.status
    return OK

def main(argv=None):
    Logger.add_std_err_logging()
    parser = optparse.OptionParser('\n'.join(USAGE),
                                   version=IIS_MANAGER_VERSION)
    parser.add_option("-C", "--config", dest="config_path",
                      help="YAML configuration file")
    parser.add_option("-H", "--host", dest="host",
                      help="administer IIS on this machine")
    for action_name in sorted(ACTIONS):
        parser.add_option("--%s" % action_name, dest="action",
                          action="store_const", const=action_name,
                          help=ACTIONS[action_name][3])

    (options, args) = parser.parse_args(argv)
    if not options.action:
        print(HEADER_TEXT)
        parser.print_help()
        exit_with_return_code(FAIL)
    arg_names = ACTIONS[options.action][2]
    if len(args) != len(arg_names):
        print("--%s requires: %s" % (options.action, ' '.join(arg_names)))
        parser.print_help()
        exit_with_return_code(FAIL)

    try:
        config = Config(config_path=options.config_path)
        if options.host:
            config.set("iis", "host", options.host)
        Logger.configure(config)
        status = run_action(options.action, args, config)
    except (UnsupportedPlatform, ConfigurationException, InvalidConfigData,
            ExternalSubsystemError, SiteNotFound) as err:
        Logger.error(str(err))
        status = FAIL
    exit_with_return_code(status)

if __name__ == "__main__":
    main()
