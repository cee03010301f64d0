#!/usr/bin/env python

import sys
import unittest

from iis_manager.ServerManager import ServerManager
from iis_manager.Exceptions import ExternalSubsystemError, UnsupportedPlatform
from iis_manager.static_data import STARTED, STOPPED, UNKNOWN, APPHOST_PATH
from MockObjects import MockAdminManager, com_site, com_pool, make_config
from MockObjects import translate_mock_com_errors

class ServerManagerTest(unittest.TestCase):

    def setUp(self):
        translate_mock_com_errors(self)
        self.default = com_site("Default", 1)
        self.intranet = com_site("Intranet", 4, 3,
                                 [("http", "*:80:intranet"),
                                  ("https", "*:443:intranet")],
                                 "D:\\intranet", "IntranetPool")
        self.default_pool = com_pool("DefaultAppPool")
        self.admin_manager = MockAdminManager([self.default, self.intranet],
                                              [self.default_pool])
        self.manager = ServerManager(make_config(), self.admin_manager)

    def test_sites(self):
        sites = self.manager.sites
        assert [site.name for site in sites] == ["Default", "Intranet"]
        assert [site.id for site in sites] == [1, 4]
        assert [site.state for site in sites] == [STARTED, STOPPED]
        assert self.admin_manager.requested_paths[0] == APPHOST_PATH

    def test_odd_state(self):
        self.default.GetPropertyByName("state").Value = 17
        assert self.manager.find_site("Default").state == UNKNOWN

    def test_find_site(self):
        assert self.manager.find_site("Intranet").id == 4
        assert self.manager.find_site("intranet") is None
        assert self.manager.find_site_by_id("4").name == "Intranet"
        assert self.manager.find_site_by_id(2) is None

    def test_bindings(self):
        bindings = self.manager.find_site("Intranet").bindings
        assert [binding.protocol for binding in bindings] == ["http", "https"]
        assert [str(binding) for binding in bindings] == ["*:80:intranet",
                                                          "*:443:intranet"]
        assert bindings[1].url() == "https://intranet:443"
        assert bindings[1].port == 443

    def test_ipv6_and_net_tcp_bindings(self):
        service = com_site("Service", 7, bindings=[("net.tcp", "808:*"),
                                                   ("http", "[::1]:8080:six")])
        sites = self.admin_manager.sections["system.applicationHost/sites"]
        sites.Collection.AddElement(service)
        bindings = self.manager.find_site("Service").bindings
        assert bindings[0].url() == "808:*"
        assert bindings[1].url() == "http://six:8080"
        assert bindings[1].host == "six"

    def test_applications(self):
        site = self.manager.find_site("Intranet")
        assert site.physical_path == "D:\\intranet"
        root = site.root_application
        assert root.path == "/"
        assert root.application_pool_name == "IntranetPool"
        root.application_pool_name = "OtherPool"
        assert self.intranet.Collection.Item(0).value("applicationPool") == \
               "OtherPool"

    def test_add_site(self):
        site = self.manager.add_site("Shop", "http", "*:8080:", "C:\\shop")
        assert site.id == 5
        element = self.admin_manager.sections["system.applicationHost/sites"] \
                  .Collection.Item(2)
        assert element.value("name") == "Shop"
        assert [str(binding) for binding in site.bindings] == ["*:8080:"]
        assert site.physical_path == "C:\\shop"
        assert self.admin_manager.CommitChanges.call_count == 0
        self.manager.commit_changes()
        assert self.admin_manager.CommitChanges.call_count == 1

    def test_first_site_gets_id_one(self):
        manager = ServerManager(make_config(), MockAdminManager())
        assert manager.add_site("Only", "http", "*:80:", "C:\\only").id == 1

    def test_add_application(self):
        site = self.manager.find_site("Default")
        application = site.add_application("/shop", "C:\\apps\\shop")
        application.application_pool_name = "ShopPool"
        shop = site.find_application("/shop")
        assert shop.application_pool_name == "ShopPool"
        assert shop.physical_path == "C:\\apps\\shop"
        assert [vdir.path for vdir in shop.virtual_directories] == ["/"]

    def test_remove_site(self):
        self.manager.remove_site(self.manager.find_site("Default"))
        assert [site.name for site in self.manager.sites] == ["Intranet"]

    def test_app_pools(self):
        app_pool = self.manager.add_application_pool("ShopPool")
        app_pool.managed_runtime_version = "v2.0"
        names = [pool.name for pool in self.manager.application_pools]
        assert names == ["DefaultAppPool", "ShopPool"]
        shop_pool = self.manager.find_application_pool("ShopPool")
        assert shop_pool.managed_runtime_version == "v2.0"
        self.manager.remove_application_pool(shop_pool)
        assert self.manager.find_application_pool("ShopPool") is None

    def test_start_stop(self):
        app_pool = self.manager.find_application_pool("DefaultAppPool")
        app_pool.stop()
        app_pool.start()
        self.manager.find_site("Default").start()
        assert self.default_pool.Methods.executed == ["Stop", "Start"]
        assert self.default.Methods.executed == ["Start"]

    def test_com_failure(self):
        self.intranet.unreadable.append("state")
        site = self.manager.find_site("Intranet")
        self.assertRaises(ExternalSubsystemError, getattr, site, "state")
        try:
            site.state
        except ExternalSubsystemError as err:
            assert err.operation == "reading site state"

    @unittest.skipIf(sys.platform == "win32", "IIS may really be here")
    def test_live_session_needs_windows(self):
        self.assertRaises(UnsupportedPlatform, ServerManager, make_config())

if __name__ == "__main__":
    unittest.main()
