#!/usr/bin/env python

"""com_support.py: the one place that touches pywin32 directly, so the
rest of iis_manager imports (and can be tested) anywhere."""

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

import sys
import functools
from iis_manager.Exceptions import ExternalSubsystemError, UnsupportedPlatform

if sys.platform == "win32":
    import pythoncom, pywintypes
    from win32com.client import Dispatch, DispatchEx, GetObject
    COM_ERRORS = (pywintypes.com_error, AttributeError)
else:
    COM_ERRORS = ()

def check_platform():
    if sys.platform != "win32":
        raise UnsupportedPlatform()

def co_initialize():
    "Every thread that talks COM has to say hello first"
    check_platform()
    pythoncom.CoInitialize()

def describe_com_error(err):
    "pywintypes.com_error packs its text in a tuple; dig it out"
    args = getattr(err, "args", ())
    if len(args) > 2 and args[2]:
        excepinfo = args[2]
        if type(excepinfo) == type(()) and len(excepinfo) > 2 and excepinfo[2]:
            return str(excepinfo[2])
    if len(args) > 1 and args[1]:
        return str(args[1])
    return str(err)

def com_guard(operation):
    """Decorator: COM failures inside the wrapped call come out as
    ExternalSubsystemError naming the operation."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except COM_ERRORS as err:
                raise ExternalSubsystemError(operation, describe_com_error(err))
        return wrapper
    return decorator

def dispatch(progid, host=None):
    "Create a COM object, on a remote machine if one is named"
    co_initialize()
    if host:
        return DispatchEx(progid, host)
    return Dispatch(progid)

def get_object(path):
    "Bind to an ADSI path (IIS:// or WinNT://)"
    co_initialize()
    return GetObject(path)
