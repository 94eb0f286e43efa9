"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


The p2director cmdline entry-point.

Runs the p2 director application to manage Eclipse installations. Options
may be passed on the command line, for example:

    p2director --destination target/eclipse
        --repository https://download.eclipse.org/releases/latest
        --installIU org.eclipse.platform.ide --p2.os linux

or in a request file (see provision/requestfile.py), or both, in which case
the values on the command line win.
"""

from p2director.common import logger
from p2director.config import config
from p2director.provision import assembler
from p2director.provision import client as clientm
from p2director.provision import options
from p2director.provision import request as requestm
from p2director.provision import requestfile
import argparse
import os
import sys


def main(args=None):
    args = _parse_arguments(args)

    root = os.getcwd() if args.root is None else args.root
    cfg = config.load(root, args.verbose)

    values, install, uninstall, properties = {}, [], [], {}
    if args.request_file is not None:
        values, install, uninstall, properties = requestfile.load(args.request_file)
        if args.verbose:
            logger.debug("Loaded request file [%s]" % args.request_file)
    values = _merge_values(values, _get_cmdline_values(args))

    request = requestm.DirectorRequest.new(values, install, uninstall, properties)
    if args.verbose:
        logger.debug("Director request:\n%s" % request)

    client = clientm.LauncherProvisioningClient(cfg, verbose=args.verbose)
    assembler.execute(request, client, args.verbose)
    logger.info("The p2 director application completed successfully")


def _parse_arguments(args):
    parser = argparse.ArgumentParser(description="Runs the p2 director application",
                                     allow_abbrev=False)
    parser.add_argument("--request_file", type=str, required=False,
        help="An ini file with director options, see the p2director documentation for the format")
    parser.add_argument("--root", type=str, required=False,
        help="The directory to look for the .p2directorrc config file in, defaults to the current directory")
    parser.add_argument("--verbose", required=False, action="store_true",
        help="Verbose output")

    director_options = parser.add_argument_group("director options")
    for option in options.ALL_OPTIONS:
        names = ["--%s" % n for n in (option.property,) + option.aliases]
        if option.kind in (options.BOOLEAN, options.MODIFIER):
            director_options.add_argument(*names, dest=option.name,
                action="store_true", default=None, help=option.help)
        elif option.kind == options.OPTIONAL_VALUE:
            director_options.add_argument(*names, dest=option.name,
                type=str, nargs="?", const="", default=None, help=option.help)
        else:
            director_options.add_argument(*names, dest=option.name,
                type=str, default=None, help=option.help)

    return parser.parse_args(args)


def _get_cmdline_values(args):
    """
    Returns the director option values that were specified on the command
    line, keyed by option name.
    """
    values = {}
    for option in options.ALL_OPTIONS:
        value = getattr(args, option.name)
        if value is not None:
            values[option.name] = value
    return values


def _merge_values(file_values, cmdline_values):
    """
    Command line values override request file values for the same option,
    regardless of the name (property name, alias) used in the request file.
    """
    merged = {}
    for name, value in file_values.items():
        if options.is_known(name) and options.get(name).name in cmdline_values:
            continue
        merged[name] = value
    merged.update(cmdline_values)
    return merged


if __name__ == "__main__":
    main(sys.argv[1:])
