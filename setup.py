#!/usr/bin/env python

"sets iis_manager up."

from setuptools import Command, setup
from unittest import TextTestRunner, TestLoader
from os.path import join as pjoin
import os

version_info = {}
with open(pjoin("lib", "_version.py")) as version_file:
    exec(version_file.read(), version_info)

LONG_DESCRIPTION = """\
iis_manager is a small administrative layer over Internet Information
Services. It creates, configures and tears down IIS websites,
application pools, virtual applications and directories, FTP
directories, local user accounts and web content permissions.

Modern operations go through the IIS configuration system
(Microsoft.ApplicationHost.WritableAdminManager); legacy operations go
through the ADSI metabase and WinNT providers. Every operation takes an
explicit session object, so the whole package can be exercised against
mocks on any platform.
"""


class CleanCommand(Command):
    user_options = [ ]
    def initialize_options(self):
        self._clean_me = [ ]
        for root, dirs, files in os.walk('.'):
            for f in files:
                if f.endswith('.pyc'):
                    self._clean_me.append(pjoin(root, f))

    def finalize_options(self):
        pass

    def run(self):
        for clean_me in self._clean_me:
            try:
                os.unlink(clean_me)
            except OSError:
                pass

class TestCommand(Command):
    user_options = [ ]
    def initialize_options(self):
        self._dir = os.getcwd()

    def finalize_options(self):
        pass

    def run(self):
        '''
        Finds all the tests modules in tests/, and runs them.
        '''
        tests = TestLoader().discover(pjoin(self._dir, 'tests'),
                                      top_level_dir=pjoin(self._dir, 'tests'))
        t = TextTestRunner(verbosity = 1)
        t.run(tests)

setup (name = "iis_manager",
       description = "Administration of IIS websites, application pools, FTP and accounts",
       version = str("%(major)d.%(minor)d.%(micro)d" % version_info["version_info"]),
       long_description = LONG_DESCRIPTION,
       packages = ["iis_manager"],
       package_dir = {"iis_manager": "lib"},
       scripts = ["scripts/iis_admin.py"],
       author = "iis_manager contributors",
       license = "BSD",
       python_requires = ">=3.9",
       install_requires = [ 'PyYAML', 'pywin32; sys_platform == "win32"' ],
       extras_require = { 'test': [ 'mock', 'pytest' ] },
       classifiers = [
           "Development Status :: 3 - Alpha",
           "Programming Language :: Python :: 3",
           "Intended Audience :: System Administrators",
           "Intended Audience :: Information Technology",
           "License :: OSI Approved :: BSD License",
           "Operating System :: Microsoft :: Windows",
           "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
           "Topic :: System :: Systems Administration",
       ],
       cmdclass = { 'test': TestCommand, 'clean': CleanCommand }
)
