#!/usr/bin/env python

import unittest

from iis_manager import app_pool_admin
from iis_manager.Exceptions import ExternalSubsystemError
from iis_manager.static_data import OK, FAIL, STARTED, STOPPED
from iis_manager.static_data import STARTING, STOPPING, UNKNOWN
from iis_manager.static_data import SUCCESS, NO_CHANGE, NOT_FOUND
from iis_manager.static_data import ALREADY_EXISTS, EXTERNAL_ERROR
from iis_manager.static_data import APP_POOL_NOT_FOUND
from MockObjects import MockServerManager, MockSite, MockApplicationPool

class AppPoolTest(unittest.TestCase):

    def setUp(self):
        self.default_pool = MockApplicationPool("DefaultAppPool", STARTED)
        self.shop_pool = MockApplicationPool("ShopPool", STOPPED, "v2.0")
        self.manager = MockServerManager([MockSite("Default", 1)],
                                         [self.default_pool, self.shop_pool])

    def test_create(self):
        result = app_pool_admin.create_app_pool(self.manager, "NewPool", "v4.0")
        assert result.kind == SUCCESS
        app_pool = self.manager.find_application_pool("NewPool")
        assert app_pool.managed_runtime_version == "v4.0"
        assert self.manager.commit_changes.call_count == 1

    def test_create_existing(self):
        result = app_pool_admin.create_app_pool(self.manager, "ShopPool", "v4.0")
        assert result.kind == ALREADY_EXISTS
        assert self.shop_pool.managed_runtime_version == "v2.0"
        assert self.manager.mutating_calls() == 0

    def test_remove(self):
        result = app_pool_admin.remove_app_pool(self.manager, "ShopPool")
        assert result.kind == SUCCESS
        assert self.manager.find_application_pool("ShopPool") is None

    def test_remove_unknown(self):
        result = app_pool_admin.remove_app_pool(self.manager, "Nowhere")
        assert result.kind == NOT_FOUND
        assert self.manager.mutating_calls() == 0

    def test_start_stopped_pool(self):
        result = app_pool_admin.start_app_pool(self.manager, "ShopPool")
        assert result.kind == SUCCESS
        assert self.shop_pool.start.call_count == 1
        assert self.shop_pool.state == STARTED

    def test_stop_started_pool(self):
        result = app_pool_admin.stop_app_pool(self.manager, "DefaultAppPool")
        assert result.kind == SUCCESS
        assert self.default_pool.stop.call_count == 1

    def test_start_only_when_stopped(self):
        for state in [STARTED, STARTING, STOPPING, UNKNOWN]:
            self.shop_pool.state = state
            result = app_pool_admin.start_app_pool(self.manager, "ShopPool")
            assert result.kind == NO_CHANGE, state
            assert result.status == OK
        assert self.shop_pool.start.call_count == 0

    def test_stop_only_when_started(self):
        for state in [STOPPED, STARTING, STOPPING, UNKNOWN]:
            self.default_pool.state = state
            result = app_pool_admin.stop_app_pool(self.manager, "DefaultAppPool")
            assert result.kind == NO_CHANGE, state
        assert self.default_pool.stop.call_count == 0

    def test_start_unknown_pool(self):
        result = app_pool_admin.start_app_pool(self.manager, "Nowhere")
        assert result.kind == NOT_FOUND
        assert result.status == FAIL

    def test_start_failure(self):
        error = ExternalSubsystemError("starting application pool",
                                       "The object identifier does not represent a valid object.")
        self.shop_pool.start.side_effect = error
        result = app_pool_admin.start_app_pool(self.manager, "ShopPool")
        assert result.kind == EXTERNAL_ERROR

    def test_name_list(self):
        names = app_pool_admin.get_app_pool_name_list(self.manager)
        assert names == "DefaultAppPool,ShopPool"

    def test_status(self):
        assert app_pool_admin.app_pool_status(self.manager, "ShopPool") == STOPPED
        assert app_pool_admin.app_pool_status(self.manager, "Nowhere") == \
               APP_POOL_NOT_FOUND

    def test_assign(self):
        result = app_pool_admin.assign_app_pool_to_site(self.manager, "Default",
                                                        "ShopPool")
        assert result.kind == SUCCESS
        site = self.manager.find_site("Default")
        assert site.root_application.application_pool_name == "ShopPool"
        assert self.manager.commit_changes.call_count == 1

    def test_assign_missing(self):
        result = app_pool_admin.assign_app_pool_to_site(self.manager, "Nowhere",
                                                        "ShopPool")
        assert result.kind == NOT_FOUND
        result = app_pool_admin.assign_app_pool_to_site(self.manager, "Default",
                                                        "Nowhere")
        assert result.kind == NOT_FOUND
        site = self.manager.find_site("Default")
        assert site.root_application.application_pool_name == "DefaultAppPool"
        assert self.manager.mutating_calls() == 0

if __name__ == "__main__":
    unittest.main()
