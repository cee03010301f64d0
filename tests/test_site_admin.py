#!/usr/bin/env python

import unittest
from xml.etree import ElementTree
import mock

from iis_manager import site_admin
from iis_manager.Exceptions import ExternalSubsystemError
from iis_manager.static_data import OK, FAIL, STARTED, STOPPED, UNKNOWN
from iis_manager.static_data import SUCCESS, NOT_FOUND, ALREADY_EXISTS
from iis_manager.static_data import INVALID_TARGET, EXTERNAL_ERROR
from iis_manager.static_data import VALID_STATES, NOT_AVAILABLE
from MockObjects import MockServerManager, MockSite, MockDirectory
from MockObjects import make_metabase, make_config
from MockObjects import MockComError, translate_mock_com_errors

class CreateWebsiteTest(unittest.TestCase):

    def setUp(self):
        self.manager = MockServerManager([MockSite("Default", 1)])

    def test_create(self):
        result = site_admin.create_website(self.manager, "Shop", "*:8080:",
                                           "C:\\sites\\shop", "ShopPool")
        assert result.kind == SUCCESS
        assert result.status == OK
        self.manager.add_site.assert_called_once_with("Shop", "http", "*:8080:",
                                                      "C:\\sites\\shop")
        assert self.manager.commit_changes.call_count == 1
        site = self.manager.find_site("Shop")
        assert site.id == 2
        assert site.root_application.application_pool_name == "ShopPool"

    def test_protocol_from_config(self):
        config = make_config({"website": {"protocol": "https"}})
        manager = MockServerManager(config=config)
        site_admin.create_website(manager, "Shop", "*:443:", "C:\\shop", "Pool")
        assert manager.add_site.call_args[0][1] == "https"

    def test_create_twice(self):
        first = site_admin.create_website(self.manager, "Shop", "*:8080:",
                                          "C:\\shop", "ShopPool")
        calls = self.manager.mutating_calls()
        second = site_admin.create_website(self.manager, "Shop", "*:8081:",
                                           "C:\\other", "OtherPool")
        assert first.kind == SUCCESS
        assert second.kind == ALREADY_EXISTS
        assert self.manager.mutating_calls() == calls
        assert self.manager.add_site.call_count == 1
        assert len(self.manager.sites) == 2

    def test_ipv6_binding(self):
        result = site_admin.create_website(self.manager, "Six",
                                           "[::1]:80:six.example",
                                           "C:\\six", "Pool")
        assert result.kind == SUCCESS
        assert self.manager.add_site.call_args[0][2] == "[::1]:80:six.example"

    def test_non_http_binding(self):
        config = make_config({"website": {"protocol": "net.tcp"}})
        manager = MockServerManager(config=config)
        result = site_admin.create_website(manager, "Service", "808:*",
                                           "C:\\service", "Pool")
        assert result.kind == SUCCESS
        assert manager.add_site.call_args[0][1:3] == ("net.tcp", "808:*")

    def test_existing_name_is_case_sensitive(self):
        result = site_admin.create_website(self.manager, "default", "*:81:",
                                           "C:\\shop", "Pool")
        assert result.kind == SUCCESS

    def test_bad_binding(self):
        for binding in ["80", "*:http:", "*:0:", "*:70000:", "a:b:c:d"]:
            result = site_admin.create_website(self.manager, "Shop", binding,
                                               "C:\\shop", "Pool")
            assert result.kind == INVALID_TARGET, binding
        assert self.manager.mutating_calls() == 0

    def test_commit_failure(self):
        error = ExternalSubsystemError("committing changes", "Access is denied.")
        self.manager.commit_changes.side_effect = error
        result = site_admin.create_website(self.manager, "Shop", "*:8080:",
                                           "C:\\shop", "Pool")
        assert result.kind == EXTERNAL_ERROR
        assert result.status == FAIL
        assert "Access is denied." in result.message

class RemoveSiteTest(unittest.TestCase):

    def setUp(self):
        self.manager = MockServerManager([MockSite("Default", 1),
                                          MockSite("Intranet", 2)])

    def test_remove(self):
        result = site_admin.remove_site(self.manager, "Intranet")
        assert result.kind == SUCCESS
        assert self.manager.find_site("Intranet") is None
        assert self.manager.commit_changes.call_count == 1

    def test_remove_unknown(self):
        result = site_admin.remove_site(self.manager, "Nowhere")
        assert result.kind == NOT_FOUND
        assert result.status == FAIL
        assert self.manager.mutating_calls() == 0
        assert len(self.manager.sites) == 2

class WebsiteListingTest(unittest.TestCase):

    def setUp(self):
        self.default = MockSite("Default", 1, STARTED, ["*:80:"],
                                "C:\\inetpub\\wwwroot")
        self.intranet = MockSite("Intranet", 2, STOPPED,
                                 ["*:80:intranet", "10.0.0.5:8080:"],
                                 "D:\\intranet")
        self.manager = MockServerManager([self.default, self.intranet])

    def parse(self):
        return ElementTree.fromstring(site_admin.get_website_list_xml(self.manager))

    def test_name_list(self):
        assert site_admin.get_website_name_list(self.manager) == "Default,Intranet"
        assert site_admin.get_website_name_list(MockServerManager()) == ""

    def test_default_site(self):
        xml = site_admin.get_website_list_xml(MockServerManager([MockSite("Default", 1)]))
        assert "<name>Default</name><id>1</id><state>Started</state>" in xml
        assert "*:80:" in xml

    def test_one_set_per_site(self):
        root = self.parse()
        assert root.tag == "newDataSet"
        sets = root.findall("Table/set")
        assert len(sets) == 2
        assert [site_set.findtext("name") for site_set in sets] == \
               ["Default", "Intranet"]
        for site_set in sets:
            assert site_set.findtext("state") in VALID_STATES

    def test_bindings_and_path(self):
        intranet = self.parse().findall("Table/set")[1]
        assert intranet.findtext("id") == "2"
        assert intranet.findtext("bindings") == "*:80:intranet,10.0.0.5:8080:"
        assert intranet.findtext("physicalPath") == "D:\\intranet"

    def test_failing_site_does_not_abort(self):
        self.default.fail_bindings = True
        self.default.fail_physical_path = True
        self.default.fail_state = True
        sets = self.parse().findall("Table/set")
        assert len(sets) == 2
        assert sets[0].findtext("bindings") == UNKNOWN
        assert sets[0].findtext("physicalPath") == UNKNOWN
        assert sets[0].findtext("state") == UNKNOWN
        assert sets[1].findtext("state") == STOPPED

    def test_websites_info(self):
        table = site_admin.get_websites_info(self.manager)
        assert table.name == "Website"
        assert table.columns == ["Name", "ID", "State", "PhysicalPath", "Bindings"]
        assert len(table) == 2
        assert table.column("Name") == ["Default", "Intranet"]
        assert table.column("ID") == ["1", "2"]
        assert table.rows[0]["Bindings"] == "http://:80"
        assert table.rows[1]["Bindings"] == "http://intranet:80, http://:8080"

    def test_websites_info_ipv6_and_net_tcp(self):
        six = MockSite("Six", 3, STARTED, ["[::1]:80:six.example"])
        service = MockSite("Service", 4, STARTED,
                           [("net.tcp", "808:*"), ("https", "[fe80::1]:443:")])
        table = site_admin.get_websites_info(MockServerManager([six, service]))
        assert table.rows[0]["Bindings"] == "http://six.example:80"
        assert table.rows[1]["Bindings"] == "808:*, https://:443"
        assert table.rows[1]["PhysicalPath"] == "C:\\inetpub\\wwwroot"

    def test_websites_info_failures(self):
        self.intranet.fail_physical_path = True
        table = site_admin.get_websites_info(self.manager)
        assert table.rows[0]["PhysicalPath"] == "C:\\inetpub\\wwwroot"
        assert table.rows[1]["PhysicalPath"] == NOT_AVAILABLE
        assert table.rows[1]["Bindings"] == NOT_AVAILABLE
        assert table.rows[1]["State"] == STOPPED

class LegacyWebsiteTest(unittest.TestCase):

    def setUp(self):
        self.directory = MockDirectory()
        translate_mock_com_errors(self)
        self.w3svc = self.directory.add("IIS://localhost/w3svc", "IIsWebService")
        self.site = self.directory.add("IIS://localhost/w3svc/3", "IIsWebServer",
                                       {"ServerBindings": [":80:"]})
        self.root = self.directory.add("IIS://localhost/w3svc/3/Root",
                                       "IIsWebVirtualDir")
        self.w3svc.CreateNewSite = mock.Mock(return_value=3)
        self.site.Start = mock.Mock()
        self.metabase = make_metabase(self.directory)

    def test_start_website(self):
        result = site_admin.start_website(self.metabase, "Shop", ":8080:shop",
                                          "C:\\shop", "ShopPool")
        assert result.kind == SUCCESS
        assert result.value == 3
        self.w3svc.CreateNewSite.assert_called_once_with("Shop", [":8080:shop"],
                                                         "C:\\shop")
        assert self.root.properties["AppPoolId"] == "ShopPool"
        assert self.root.SetInfo.call_count == 1
        assert self.site.Start.call_count == 1

    def test_start_website_without_pool(self):
        result = site_admin.start_website(self.metabase, "Shop", ":8080:",
                                          "C:\\shop")
        assert result.kind == SUCCESS
        assert self.root.Put.call_count == 0

    def test_start_website_failure(self):
        self.w3svc.CreateNewSite.side_effect = MockComError("CreateNewSite")
        result = site_admin.start_website(self.metabase, "Shop", ":8080:",
                                          "C:\\shop")
        assert result.kind == EXTERNAL_ERROR
        assert self.site.Start.call_count == 0

    def test_add_host_header(self):
        result = site_admin.add_host_header(self.metabase, "www.shop.com", 3)
        assert result.kind == SUCCESS
        assert self.site.properties["ServerBindings"] == [":80:", ":80:www.shop.com"]
        assert self.site.SetInfo.call_count == 1

    def test_add_host_header_twice(self):
        site_admin.add_host_header(self.metabase, "www.shop.com", 3, 8080)
        result = site_admin.add_host_header(self.metabase, "www.shop.com", 3, 8080)
        assert result.kind == ALREADY_EXISTS
        assert self.site.SetInfo.call_count == 1

    def test_add_host_header_no_site(self):
        result = site_admin.add_host_header(self.metabase, "www.shop.com", 9)
        assert result.kind == EXTERNAL_ERROR

if __name__ == "__main__":
    unittest.main()
