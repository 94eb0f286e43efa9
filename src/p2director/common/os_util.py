"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause
"""

import subprocess


def run_cmd(cmd, cwd=None):
    """
    Run OS command and return its exit code.

    The command is a list of arguments, it is not run through a shell.
    stdout and stderr are inherited, so the output of the command shows up
    as it is produced.

    :param cmd: command to run, as a list of strings
    :param cwd: directory to run command in, defaults to the current directory
    :return: the exit code
    """
    process = subprocess.Popen(cmd, cwd=cwd)
    return process.wait()
