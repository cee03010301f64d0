#!/usr/bin/env python

"common stuff that many iis_manager modules need."

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

import yaml
from iis_manager.Exceptions import InvalidBinding
from iis_manager.static_data import LOCAL_HOSTS, METABASE_PREFIX
from iis_manager.static_data import VDIR_CLASS_SUFFIXES, HTTP_PROTOCOLS

def yaml_load(*args, **kwargs):
    return yaml.safe_load(*args, **kwargs)

def yaml_dump(*args, **kwargs):
    kwargs.setdefault("default_flow_style", False)
    return yaml.safe_dump(*args, **kwargs)

def find_by_attribute(collection, attribute, value):
    """IIS collections don't give us an index we can trust for every
    kind of object, so walk the whole thing and hand back the first
    match (or None)."""
    for item in collection:
        if getattr(item, attribute) == value:
            return item
    return None

def find_by_name(collection, name):
    "Exact, case-sensitive match on the 'name' attribute"
    return find_by_attribute(collection, "name", name)

def join_names(collection):
    "comma-joined names, no trailing comma"
    return ','.join([item.name for item in collection])

def parse_binding(binding_information):
    """Split ip:port:host binding information. The split runs from the
    right, so a bracketed IPv6 address keeps its colons.
    >>> parse_binding("*:80:www.example.com")
    ('*', 80, 'www.example.com')
    >>> parse_binding(":8080:")
    ('', 8080, '')
    >>> parse_binding("[::1]:443:six.example.com")
    ('[::1]', 443, 'six.example.com')
    """
    fields = str(binding_information).rsplit(':', 2)
    if len(fields) != 3:
        raise InvalidBinding(binding_information)
    ip_address, port, host = fields
    if ':' in ip_address and not (ip_address.startswith('[') and
                                  ip_address.endswith(']')):
        raise InvalidBinding(binding_information)
    try:
        port = int(port)
    except ValueError:
        raise InvalidBinding(binding_information)
    if port < 1 or port > 65535:
        raise InvalidBinding(binding_information)
    return ip_address, port, host

def is_http_protocol(protocol):
    "Only http and https bindings use the ip:port:host form"
    return str(protocol).lower() in HTTP_PROTOCOLS

def binding_url(protocol, binding_information):
    """
    >>> binding_url("https", "*:443:shop.example.com")
    'https://shop.example.com:443'
    >>> binding_url("net.tcp", "808:*")
    '808:*'
    """
    if not is_http_protocol(protocol):
        return str(binding_information)
    ip_address, port, host = parse_binding(binding_information)
    return "%s://%s:%s" % (protocol, host, port)

def is_local_host(host):
    "Whether a host name refers to this machine"
    if not host:
        return True
    return host.lower() in LOCAL_HOSTS

def metabase_app_root(metabase_path):
    """Turn IIS://host/W3SVC/1/Root into the AppRoot form /LM/W3SVC/1/Root
    >>> metabase_app_root("IIS://localhost/W3SVC/1/Root")
    '/LM/W3SVC/1/Root'
    """
    start = metabase_path.index('/', len(METABASE_PREFIX))
    return "/LM" + metabase_path[start:]

def child_path(metabase_path, name):
    "ADSI path of a child node"
    return "%s/%s" % (metabase_path.rstrip('/'), name)

def can_hold_virtual_dirs(class_name):
    "Only sites and virtual directories take virtual directory children"
    for suffix in VDIR_CLASS_SUFFIXES:
        if class_name.endswith(suffix):
            return True
    return False

def virtual_dir_class(class_name):
    """Schema class of a virtual directory created under class_name
    >>> virtual_dir_class("IIsWebServer")
    'IIsWebVirtualDir'
    >>> virtual_dir_class("IIsFtpVirtualDir")
    'IIsFtpVirtualDir'
    """
    if class_name.endswith("Server"):
        return class_name[:-len("Server")] + "VirtualDir"
    return class_name

if __name__ == "__main__":
    import doctest
    doctest.testmod()
