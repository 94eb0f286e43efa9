"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Launches the p2 director application of an Eclipse installation.
"""
from p2director.common import logger
from p2director.common import os_util
from p2director.provision import ProvisioningClient
import glob
import os
import re


LAUNCHER_JAR_GLOB = "org.eclipse.equinox.launcher_*.jar"
LAUNCHER_JAR_VERSION_RE = re.compile(r"launcher_(\d+)\.(\d+)\.(\d+)")


class LauncherProvisioningClient(ProvisioningClient):
    """
    Runs the director in a separate process, either through the eclipse
    executable or through the equinox launcher jar, and returns the
    process exit code.
    """

    def __init__(self, cfg, cwd=None, verbose=False):
        assert cfg is not None
        self._cfg = cfg
        self._cwd = cwd
        self._verbose = verbose

    def invoke(self, args):
        cmd = self.get_command(args)
        if self._verbose:
            logger.debug("Running command: %s" % " ".join(cmd))
        return os_util.run_cmd(cmd, cwd=self._cwd)

    def get_command(self, args):
        """
        Returns the full command line, as a list, that runs the director with
        the specified program arguments.
        """
        launcher_args = ["-nosplash"]
        if self._cfg.console_log:
            launcher_args.append("-consoleLog")
        launcher_args += ["-application", self._cfg.application]

        if self._cfg.eclipse_executable is not None:
            cmd = [self._cfg.eclipse_executable] + launcher_args + list(args)
            if len(self._cfg.vm_args) > 0:
                # everything after -vmargs is passed to the jvm
                cmd += ["-vmargs"] + list(self._cfg.vm_args)
            return cmd

        return ([self._cfg.java_executable] + list(self._cfg.vm_args) +
                ["-jar", find_launcher_jar(self._cfg.eclipse_home)] +
                launcher_args + list(args))


def find_launcher_jar(eclipse_home):
    """
    Returns the path to the equinox launcher jar in the plugins directory of
    the specified Eclipse installation.

    If there are multiple launcher jars, the one with the highest
    major.minor.micro version is returned.
    """
    if eclipse_home is None:
        raise Exception("eclipse_home is not set, set it in .p2directorrc or using the P2DIRECTOR_ECLIPSE_HOME environment variable")
    plugins_dir = os.path.join(eclipse_home, "plugins")
    jars = sorted(glob.glob(os.path.join(plugins_dir, LAUNCHER_JAR_GLOB)),
                  key=_launcher_jar_sort_key)
    if len(jars) == 0:
        raise Exception("Did not find the equinox launcher jar at [%s]" % os.path.join(plugins_dir, LAUNCHER_JAR_GLOB))
    return jars[-1]


def _launcher_jar_sort_key(path):
    """
    Sorts numerically on the version, so 1.6.1000 comes after 1.6.900.
    """
    name = os.path.basename(path)
    m = LAUNCHER_JAR_VERSION_RE.search(name)
    version = () if m is None else tuple(int(p) for p in m.groups())
    return (version, name)
