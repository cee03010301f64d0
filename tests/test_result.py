#!/usr/bin/env python

import unittest
from xml.etree import ElementTree

from iis_manager import Result
from iis_manager.Result import OperationResult
from iis_manager.projections import DataTable, website_list_document
from iis_manager.projections import path_listing_document
from iis_manager.mini_utility import yaml_load
from iis_manager.static_data import OK, FAIL, RESULT_KINDS
from iis_manager.static_data import SUCCESS, NO_CHANGE

class OperationResultTest(unittest.TestCase):

    def test_status(self):
        for kind in RESULT_KINDS:
            result = OperationResult(kind, "message")
            if kind in [SUCCESS, NO_CHANGE]:
                assert result.status == OK, kind
                assert result
            else:
                assert result.status == FAIL, kind
                assert not result

    def test_helpers(self):
        assert Result.success("made it", 3) == OperationResult(SUCCESS, "made it", 3)
        assert Result.not_found().kind == "NOT_FOUND"
        assert Result.already_exists().kind == "ALREADY_EXISTS"
        assert Result.invalid_target().kind == "INVALID_TARGET"
        assert Result.external_error().kind == "EXTERNAL_ERROR"
        assert Result.io_error().kind == "IO_ERROR"
        assert Result.no_change().kind == "NO_CHANGE"

    def test_text(self):
        assert str(Result.not_found("No site named 'x'")) == \
               "NOT_FOUND: No site named 'x'"
        assert str(Result.success()) == "SUCCESS"

    def test_unknown_kind(self):
        self.assertRaises(ValueError, OperationResult, "MAYBE")

class ProjectionTest(unittest.TestCase):

    def test_website_document(self):
        rows = [{"name": "Default", "id": 1, "state": "Started",
                 "bindings": "*:80:", "physicalPath": "C:\\inetpub\\wwwroot"},
                {"name": "R&D <lab>", "id": 2, "state": "Stopped",
                 "bindings": "", "physicalPath": "D:\\lab"}]
        root = ElementTree.fromstring(website_list_document(rows))
        sets = root.findall("Table/set")
        assert len(sets) == 2
        assert [child.tag for child in sets[0]] == ["name", "id", "state",
                                                    "bindings", "physicalPath"]
        assert sets[1].findtext("name") == "R&D <lab>"

    def test_empty_website_document(self):
        root = ElementTree.fromstring(website_list_document([]))
        assert root.tag == "newDataSet"
        assert len(root) == 0

    def test_path_listing(self):
        xml = path_listing_document("VirtualDirectories", "VirtualDirectory",
                                    "Name", [("/", "C:\\web")])
        root = ElementTree.fromstring(xml)
        assert root.find("VirtualDirectory/Name").text == "/"
        assert root.find("VirtualDirectory/PhysicalPath").text == "C:\\web"
        assert "\n" in xml

    def test_data_table(self):
        table = DataTable("Website", ["Name", "ID"])
        table.add_row("Default", "1")
        self.assertRaises(ValueError, table.add_row, "too", "many", "values")
        assert len(table) == 1
        assert list(table) == [{"Name": "Default", "ID": "1"}]
        assert yaml_load(table.to_yaml()) == {"Website": [{"Name": "Default",
                                                           "ID": "1"}]}

if __name__ == "__main__":
    unittest.main()
