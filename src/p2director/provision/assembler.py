"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Turns a DirectorRequest into the director's program arguments and runs the
director.
"""
from p2director.common import argsupport
from p2director.common import logger
from p2director.provision import DirectorFailure
from p2director.provision import is_exit_ok
from p2director.provision import cmdlineargs
from p2director.provision import options


INSTALL_FEATURES_PROPERTY = "org.eclipse.update.install.features"


def execute(request, client, verbose=False):
    """
    Assembles the program arguments for the specified request and invokes
    the director once, using the specified ProvisioningClient.

    Returns the program arguments, as a list, on success.
    Raises a DirectorFailure if the director does not return EXIT_OK.
    """
    args = assemble(request)
    if verbose:
        logger.debug("Running the p2 director with program arguments: %s" % args)
    status = client.invoke(args.to_list())
    if not is_exit_ok(status):
        raise DirectorFailure(status, str(args))
    return args.to_list()


def assemble(request):
    """
    Returns the CommandLineArguments for the specified request.

    Options are processed in the order of options.ALL_OPTIONS.
    """
    args = cmdlineargs.CommandLineArguments()
    for option in options.ALL_OPTIONS:
        _EMITTERS[option.kind](args, option, request)
    return args


def get_unit_list(csv_units, units):
    """
    Returns the list of units to pass to the director: the entries of the
    csv string first, followed by the structured units.
    """
    unit_list = argsupport.split_csv(csv_units)
    for unit in units:
        unit_list.append(unit.unit_string)
    return unit_list


def get_property_map(csv_properties, properties, install_features):
    """
    Returns the merged profile properties.

    The structured properties override the ones from the csv string with the
    same key, without changing their position.
    """
    property_map = argsupport.parse_properties_csv(csv_properties)
    property_map.update(properties)
    if install_features:
        property_map[INSTALL_FEATURES_PROPERTY] = "true"
    return property_map


def _emit_string(args, option, request):
    args.add_non_empty(option.flag, request.get(option.name))


def _emit_boolean(args, option, request):
    args.add_flag_if_true(option.flag, request.get(option.name))


def _emit_units(args, option, request):
    if option is options.INSTALL_IUS:
        units = request.install_units
    elif option is options.UNINSTALL_IUS:
        units = request.uninstall_units
    else:
        raise Exception("No structured units for option %s" % option)
    unit_list = get_unit_list(request.get(option.name), units)
    args.add_not_empty(option.flag, unit_list, ",")


def _emit_properties(args, option, request):
    property_map = get_property_map(request.get(option.name),
                                    request.properties,
                                    request.get(options.INSTALL_FEATURES.name))
    args.add_map_not_empty(option.flag, property_map, "=", ",")


def _emit_optional_value(args, option, request):
    value = request.get(option.name)
    if value is None:
        return
    if len(value) == 0:
        args.add(option.flag)
    else:
        args.add(option.flag, value)


def _emit_nothing(args, option, request):
    pass


_EMITTERS = {
    options.STRING: _emit_string,
    options.BOOLEAN: _emit_boolean,
    options.UNITS: _emit_units,
    options.PROPERTIES: _emit_properties,
    options.OPTIONAL_VALUE: _emit_optional_value,
    options.MODIFIER: _emit_nothing,
}
