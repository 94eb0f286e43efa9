"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Abstractions shared by everything that talks to the p2 director application.
"""
from abc import ABC, abstractmethod


# the status the director application returns when it completed successfully
EXIT_OK = 0


def is_exit_ok(status):
    """
    Returns True if the specified status is the director's success sentinel.

    bools are rejected explicitly because False == 0 in Python.
    """
    if status is None or isinstance(status, bool):
        return False
    return status == EXIT_OK


class ProvisioningClient(ABC):
    """
    Runs the director application with a list of program arguments.
    """

    @abstractmethod
    def invoke(self, args):
        """
        Runs the director with the specified list of string tokens and returns
        its exit status. Blocks until the director has completed.
        """
        pass


class DirectorError(Exception):
    pass


class ValidationError(DirectorError):
    """
    Raised for invalid input, before the director application is invoked.
    """
    pass


class MalformedPropertyError(ValidationError):

    def __init__(self, entry):
        super().__init__("Malformed property entry [%s], expected key=value" % entry)
        self.entry = entry


class DirectorFailure(DirectorError):
    """
    Raised when the director application returns a status other than EXIT_OK.
    """

    def __init__(self, status, arguments):
        super().__init__("Call to p2 director application failed with exit code %s. Program arguments were: '%s'." % (status, arguments))
        self.status = status
        self.arguments = arguments
