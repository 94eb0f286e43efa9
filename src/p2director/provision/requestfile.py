"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Reads director requests from ini-style files.

Example:

    [director]
    destination = target/product
    repositories = https://download.eclipse.org/releases/latest
    installIUs = org.eclipse.platform.ide
    p2.os = linux

    [properties]
    org.eclipse.equinox.p2.reconciler.dropins.directory = dropins

    [install:egit]
    id = org.eclipse.egit
    feature = true

    [uninstall:old]
    id = org.example.old
    version = 1.0.0

Option names are case sensitive. Units are kept in file order.
"""
from p2director.provision import iu as ium
import configparser
import os


DIRECTOR_SECTION = "director"
PROPERTIES_SECTION = "properties"
INSTALL_SECTION_PREFIX = "install:"
UNINSTALL_SECTION_PREFIX = "uninstall:"


def load(path):
    """
    Reads the request file at the specified path.

    Returns a tuple: (values, install units, uninstall units, properties).
    """
    if not os.path.isfile(path):
        raise Exception("request file not found [%s]" % path)
    parser = configparser.ConfigParser(interpolation=None,
                                       default_section="__no_defaults__")
    # option names such as installIUs are case sensitive
    parser.optionxform = str
    with open(path, "r") as f:
        parser.read_file(f)
    return parse(parser, path)


def parse(parser, path):
    values = {}
    install = []
    uninstall = []
    properties = {}
    for section in parser.sections():
        items = dict(parser.items(section))
        if section == DIRECTOR_SECTION:
            values.update(items)
        elif section == PROPERTIES_SECTION:
            properties.update(items)
        elif section.startswith(INSTALL_SECTION_PREFIX):
            install.append(ium.InstallableUnit.from_dict(items))
        elif section.startswith(UNINSTALL_SECTION_PREFIX):
            uninstall.append(ium.InstallableUnit.from_dict(items))
        else:
            raise Exception("Unknown section [%s] in request file [%s]" % (section, path))
    return (values, install, uninstall, properties)
