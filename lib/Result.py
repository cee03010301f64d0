#!/usr/bin/env python

"""Result.py: every administrative operation reports back through an
OperationResult, so callers can tell 'done' from 'nothing to do' from
'IIS said no' without reading log text."""

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

from iis_manager.static_data import FAIL, RESULT_KINDS, RESULT_STATUS
from iis_manager.static_data import SUCCESS, NO_CHANGE, NOT_FOUND
from iis_manager.static_data import ALREADY_EXISTS, INVALID_TARGET
from iis_manager.static_data import EXTERNAL_ERROR, IO_ERROR

class OperationResult:
    """What happened when we asked the external system to do
    something.
    kind -- one of the result kinds in static_data
    message -- human-readable description
    value -- optional payload (a new site id, command output...)
    """

    def __init__(self, kind, message='', value=None):
        if kind not in RESULT_KINDS:
            raise ValueError("Unknown result kind: %s" % kind)
        self.kind    = kind
        self.message = message
        self.value   = value

    def get_status(self):
        "OK or FAIL, for callers that only care about return codes"
        return RESULT_STATUS.get(self.kind, FAIL)

    status = property(get_status)

    def succeeded(self):
        return self.kind in RESULT_STATUS

    def __bool__(self):
        return self.succeeded()

    def __eq__(self, other):
        if isinstance(other, OperationResult):
            return (self.kind, self.message, self.value) == \
                   (other.kind, other.message, other.value)
        return NotImplemented

    def __repr__(self):
        if self.message:
            return "%s: %s" % (self.kind, self.message)
        return self.kind

    def __str__(self):
        return self.__repr__()

def success(message='', value=None):
    return OperationResult(SUCCESS, message, value)

def no_change(message=''):
    return OperationResult(NO_CHANGE, message)

def not_found(message=''):
    return OperationResult(NOT_FOUND, message)

def already_exists(message=''):
    return OperationResult(ALREADY_EXISTS, message)

def invalid_target(message=''):
    return OperationResult(INVALID_TARGET, message)

def external_error(message=''):
    return OperationResult(EXTERNAL_ERROR, message)

def io_error(message=''):
    return OperationResult(IO_ERROR, message)
