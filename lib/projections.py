#!/usr/bin/env python

"""projections.py: the shapes in which IIS state is handed back to
callers: small XML documents and an in-memory table."""

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

from xml.etree import ElementTree
from iis_manager.mini_utility import yaml_dump

def add_text_element(parent, tag, text):
    element = ElementTree.SubElement(parent, tag)
    element.text = str(text)
    return element

def to_string(root, indent=False):
    if indent:
        ElementTree.indent(root)
    return ElementTree.tostring(root, encoding="unicode")

def website_list_document(site_rows):
    """site_rows is a list of dictionaries holding name, id, state,
    bindings and physicalPath. Each site sits in its own Table/set."""
    root = ElementTree.Element("newDataSet")
    for row in site_rows:
        table = ElementTree.SubElement(root, "Table")
        site_set = ElementTree.SubElement(table, "set")
        for tag in ["name", "id", "state", "bindings", "physicalPath"]:
            add_text_element(site_set, tag, row[tag])
    return to_string(root)

def path_listing_document(root_tag, item_tag, key_tag, entries):
    """entries are (key, physical path) pairs, e.g.
    VirtualDirectories/VirtualDirectory/Name or
    VirtualApplications/Application/Path"""
    root = ElementTree.Element(root_tag)
    for key, physical_path in entries:
        item = ElementTree.SubElement(root, item_tag)
        add_text_element(item, key_tag, key)
        add_text_element(item, "PhysicalPath", physical_path)
    return to_string(root, indent=True)

class DataTable:

    """A named table with ordered columns; each row is a dictionary
    keyed by column name."""

    def __init__(self, name, columns):
        self.name    = name
        self.columns = list(columns)
        self.rows    = []

    def add_row(self, *values):
        if len(values) != len(self.columns):
            msg = "Table %s has %d columns, got %d values"
            raise ValueError(msg % (self.name, len(self.columns), len(values)))
        row = dict(zip(self.columns, values))
        self.rows.append(row)
        return row

    def column(self, column_name):
        return [row[column_name] for row in self.rows]

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def to_yaml(self):
        return yaml_dump({self.name: self.rows})
