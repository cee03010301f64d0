#!/usr/bin/env python

"""ServerManager.py: wraps the IIS configuration system
(Microsoft.ApplicationHost.WritableAdminManager, the COM face of
Microsoft.Web.Administration) so that sites, application pools and
applications look like ordinary python objects. Like Metabase.py, it
exists so the administrative functions can be handed a mock instead of
a live server for unit-testing."""

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

from iis_manager.com_support import com_guard, dispatch
from iis_manager.Config import Config
from iis_manager.Logger import Logger
from iis_manager.mini_utility import find_by_name, find_by_attribute
from iis_manager.mini_utility import is_local_host, parse_binding, binding_url
from iis_manager.static_data import ADMIN_MANAGER_PROGID, APPHOST_PATH
from iis_manager.static_data import SITES_SECTION, POOLS_SECTION, ROOT_PATH
from iis_manager.static_data import STATE_LOOKUP, UNKNOWN

def get_property(element, name):
    return element.GetPropertyByName(name).Value

def set_property(element, name, value):
    element.GetPropertyByName(name).Value = value

def iter_elements(collection):
    for index in range(collection.Count):
        yield collection.Item(index)

def add_element(collection, element_name, **properties):
    "Create a configuration element, fill it in, and append it"
    element = collection.CreateNewElement(element_name)
    for name in properties:
        set_property(element, name, properties[name])
    return element

def run_method(element, method_name):
    element.Methods.Item(method_name).CreateInstance().Execute()

def state_name(element):
    "runtime state is an integer; anything odd is Unknown"
    return STATE_LOOKUP.get(get_property(element, "state"), UNKNOWN)

class Binding:
    "One entry of a site's <bindings> collection"

    def __init__(self, element):
        self.element = element

    @property
    @com_guard("reading binding protocol")
    def protocol(self):
        return get_property(self.element, "protocol")

    @property
    @com_guard("reading binding information")
    def binding_information(self):
        return get_property(self.element, "bindingInformation")

    @property
    def host(self):
        return parse_binding(self.binding_information)[2]

    @property
    def port(self):
        return parse_binding(self.binding_information)[1]

    def url(self):
        return binding_url(self.protocol, self.binding_information)

    def __str__(self):
        return self.binding_information

class VirtualDirectory:
    "A path mapping inside an application"

    def __init__(self, element):
        self.element = element

    @property
    @com_guard("reading virtual directory path")
    def path(self):
        return get_property(self.element, "path")

    @property
    @com_guard("reading virtual directory physical path")
    def physical_path(self):
        return get_property(self.element, "physicalPath")

class Application:
    "An application under a site; the site itself is application '/'"

    def __init__(self, element):
        self.element = element

    @property
    @com_guard("reading application path")
    def path(self):
        return get_property(self.element, "path")

    @com_guard("reading application pool of application")
    def get_application_pool_name(self):
        return get_property(self.element, "applicationPool")

    @com_guard("assigning application pool to application")
    def set_application_pool_name(self, app_pool):
        set_property(self.element, "applicationPool", app_pool)

    application_pool_name = property(get_application_pool_name,
                                     set_application_pool_name)

    @property
    @com_guard("listing virtual directories")
    def virtual_directories(self):
        return [VirtualDirectory(element) for element in
                iter_elements(self.element.Collection)]

    def find_virtual_directory(self, path):
        return find_by_attribute(self.virtual_directories, "path", path)

    @com_guard("adding virtual directory")
    def add_virtual_directory(self, path, physical_path):
        collection = self.element.Collection
        element = add_element(collection, "virtualDirectory", path=path,
                              physicalPath=physical_path)
        collection.AddElement(element, -1)
        return VirtualDirectory(element)

    @property
    def physical_path(self):
        "physical path of the application's own root directory"
        vdir = self.find_virtual_directory(ROOT_PATH)
        if vdir is None:
            vdir = self.virtual_directories[0]
        return vdir.physical_path

class Site:
    "A configured website"

    def __init__(self, element):
        self.element = element

    @property
    @com_guard("reading site name")
    def name(self):
        return get_property(self.element, "name")

    @property
    @com_guard("reading site id")
    def id(self):
        return int(get_property(self.element, "id"))

    @property
    @com_guard("reading site state")
    def state(self):
        return state_name(self.element)

    @property
    @com_guard("listing site bindings")
    def bindings(self):
        collection = self.element.ChildElements.Item("bindings").Collection
        return [Binding(element) for element in iter_elements(collection)]

    @com_guard("adding site binding")
    def add_binding(self, protocol, binding_information):
        collection = self.element.ChildElements.Item("bindings").Collection
        element = add_element(collection, "binding", protocol=protocol,
                              bindingInformation=binding_information)
        collection.AddElement(element, -1)
        return Binding(element)

    @property
    @com_guard("listing site applications")
    def applications(self):
        return [Application(element) for element in
                iter_elements(self.element.Collection)]

    def find_application(self, path):
        return find_by_attribute(self.applications, "path", path)

    @com_guard("adding application")
    def add_application(self, path, physical_path):
        collection = self.element.Collection
        element = add_element(collection, "application", path=path)
        collection.AddElement(element, -1)
        application = Application(element)
        application.add_virtual_directory(ROOT_PATH, physical_path)
        return application

    @property
    def root_application(self):
        return self.find_application(ROOT_PATH)

    @property
    def physical_path(self):
        return self.root_application.find_virtual_directory(ROOT_PATH).physical_path

    @com_guard("starting site")
    def start(self):
        run_method(self.element, "Start")

    @com_guard("stopping site")
    def stop(self):
        run_method(self.element, "Stop")

class ApplicationPool:
    "A worker process group"

    def __init__(self, element):
        self.element = element

    @property
    @com_guard("reading application pool name")
    def name(self):
        return get_property(self.element, "name")

    @property
    @com_guard("reading application pool state")
    def state(self):
        return state_name(self.element)

    @com_guard("reading managed runtime version")
    def get_managed_runtime_version(self):
        return get_property(self.element, "managedRuntimeVersion")

    @com_guard("setting managed runtime version")
    def set_managed_runtime_version(self, version):
        set_property(self.element, "managedRuntimeVersion", version)

    managed_runtime_version = property(get_managed_runtime_version,
                                       set_managed_runtime_version)

    @com_guard("starting application pool")
    def start(self):
        run_method(self.element, "Start")

    @com_guard("stopping application pool")
    def stop(self):
        run_method(self.element, "Stop")

class ServerManager:
    """A session against the IIS configuration store. Nothing is
    cached: every property walks the live configuration, and nothing is
    written until commit_changes()."""

    def __init__(self, config=None, admin_manager=None):
        '''
        config -- a Config; iis.host picks the machine to administer
        admin_manager -- an already-created admin manager (or a mock)
        '''
        if config is None:
            config = Config()
        self.config = config
        self.host = config.get_host()
        self.admin_manager = admin_manager
        if self.admin_manager is None:
            self.admin_manager = self._open_admin_manager()

    @com_guard("opening the IIS configuration system")
    def _open_admin_manager(self):
        remote_host = None
        if not is_local_host(self.host):
            remote_host = self.host
            Logger.debug("Opening IIS configuration on %s" % remote_host)
        admin_manager = dispatch(ADMIN_MANAGER_PROGID, remote_host)
        admin_manager.CommitPath = APPHOST_PATH
        return admin_manager

    def _collection(self, section_name):
        section = self.admin_manager.GetAdminSection(section_name, APPHOST_PATH)
        return section.Collection

    @property
    @com_guard("listing sites")
    def sites(self):
        return [Site(element) for element in
                iter_elements(self._collection(SITES_SECTION))]

    @property
    @com_guard("listing application pools")
    def application_pools(self):
        return [ApplicationPool(element) for element in
                iter_elements(self._collection(POOLS_SECTION))]

    def find_site(self, name):
        return find_by_name(self.sites, name)

    def find_site_by_id(self, site_id):
        return find_by_attribute(self.sites, "id", int(site_id))

    def find_application_pool(self, name):
        return find_by_name(self.application_pools, name)

    def _next_site_id(self):
        site_ids = [site.id for site in self.sites]
        if not site_ids:
            return 1
        return max(site_ids) + 1

    @com_guard("adding site")
    def add_site(self, name, protocol, binding_information, physical_path):
        "Queue a new site with one binding and a root application"
        site_id = self._next_site_id()
        collection = self._collection(SITES_SECTION)
        element = add_element(collection, "site", name=name, id=site_id)
        collection.AddElement(element, -1)
        site = Site(element)
        site.add_binding(protocol, binding_information)
        site.add_application(ROOT_PATH, physical_path)
        return site

    def _delete_named_element(self, section_name, name):
        collection = self._collection(section_name)
        for index in range(collection.Count):
            if get_property(collection.Item(index), "name") == name:
                collection.DeleteElement(index)
                return

    @com_guard("removing site")
    def remove_site(self, site):
        self._delete_named_element(SITES_SECTION, site.name)

    @com_guard("adding application pool")
    def add_application_pool(self, name):
        collection = self._collection(POOLS_SECTION)
        element = add_element(collection, "add", name=name)
        collection.AddElement(element, -1)
        return ApplicationPool(element)

    @com_guard("removing application pool")
    def remove_application_pool(self, app_pool):
        self._delete_named_element(POOLS_SECTION, app_pool.name)

    @com_guard("committing changes")
    def commit_changes(self):
        self.admin_manager.CommitChanges()
