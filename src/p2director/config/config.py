"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Responsible for loading the p2director config file, which describes how to
launch the director application.
"""


from p2director.common import argsupport
from p2director.common import logger
import configparser
import os


DIRECTOR_APPLICATION = "org.eclipse.equinox.p2.director"
ECLIPSE_HOME_ENV_VAR_NAME = "P2DIRECTOR_ECLIPSE_HOME"


def load(root, verbose=False):
    """
    Looks for a config file called .p2directorrc in the following locations:
      - <root>/tools/etc/.p2directorrc
      - <root>/tools/.p2directorrc
      - <root>/.p2directorrc

    If no config file is found, uses default values.

    Returns a Config instance.
    """
    parser = configparser.RawConfigParser()

    def launcher(option, dflt, valid_values=None):
        """Read from [launcher] section """
        return _get_value_from_config(parser, "launcher", option, dflt, valid_values)

    search_locations = ("tools/etc", "tools", ".")
    for loc in search_locations:
        cfg_path = os.path.join(root, loc, ".p2directorrc")
        if os.path.exists(cfg_path):
            with open(cfg_path, 'r') as f:
                parser.read_file(f)
            if verbose:
                logger.info("Loading configuration at [%s]" % cfg_path)
            break

    cfg = Config(
        eclipse_home=launcher("eclipse_home", None),
        eclipse_executable=launcher("eclipse_executable", None),
        java_executable=launcher("java_executable", "java"),
        vm_args=launcher("vm_args", ()),
        application=launcher("application", DIRECTOR_APPLICATION),
        console_log=launcher("console_log", True, valid_values=("true", "false", "True", "False")),
    )

    if verbose:
        logger.raw("Running with configuration:\n%s\n" % str(cfg))

    return cfg


def _get_value_from_config(parser, section, option, dflt, valid_values):
    try:
        value = parser.get(section, option)
        if valid_values is not None and value not in valid_values:
            raise Exception("Invalid value for %s.%s [%s] - valid values are: %s" % (section, option, value, valid_values))
        return value
    except configparser.NoOptionError:
        return dflt
    except configparser.NoSectionError:
        return dflt


class Config:

    def __init__(self,
        eclipse_home=None,
        eclipse_executable=None,
        java_executable="java",
        vm_args=(),
        application=DIRECTOR_APPLICATION,
        console_log=True):

        # launcher
        self._eclipse_home = _none_if_empty(eclipse_home)
        self.eclipse_executable = _none_if_empty(eclipse_executable)
        self.java_executable = java_executable
        self.vm_args = _to_tuple(vm_args)
        self.application = application
        self.console_log = argsupport.to_bool(console_log)

    @property
    def eclipse_home(self):
        eclipse_home = os.getenv(ECLIPSE_HOME_ENV_VAR_NAME)
        if eclipse_home is None or len(eclipse_home) == 0:
            eclipse_home = self._eclipse_home
        return eclipse_home

    def __str__(self):
        return """[launcher]
eclipse_home=%s
eclipse_executable=%s
java_executable=%s
vm_args=%s
application=%s
console_log=%s
""" % (self.eclipse_home,
       self.eclipse_executable,
       self.java_executable,
       self.vm_args,
       self.application,
       self.console_log)


def _none_if_empty(thing):
    if thing is None:
        return None
    thing = thing.strip()
    return None if len(thing) == 0 else thing


def _to_tuple(thing):
    if isinstance(thing, tuple):
        return thing
    elif isinstance(thing, list):
        return tuple(thing)
    elif isinstance(thing, str):
        # vm args are space separated, like on the java command line
        return tuple(thing.split())
    raise Exception("Cannot convert to tuple [%s]" % thing)

