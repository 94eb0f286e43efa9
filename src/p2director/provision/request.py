"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


The values for a single director invocation.
"""
from p2director.common import argsupport
from p2director.provision import ValidationError
from p2director.provision import iu as ium
from p2director.provision import options


class DirectorRequest:
    """
    An immutable set of option values. Use DirectorRequest.new to create an
    instance from caller supplied values.
    """

    def __init__(self, values, install_units, uninstall_units, properties):
        self._values = dict(values)
        self._install_units = tuple(install_units)
        self._uninstall_units = tuple(uninstall_units)
        self._properties = dict(properties)

    @classmethod
    def new(cls, values, install=(), uninstall=(), properties=None):
        """
        Validates and normalizes the specified values and returns a new
        DirectorRequest.

        values: a dict of option values, keyed by option name, property name
                (for example "p2.os") or alias (for example "installIU")
        install/uninstall: structured units to install/uninstall, each one
                either an InstallableUnit or a dict
        properties: a dict of profile properties
        """
        normalized = {}
        for name, value in values.items():
            if not options.is_known(name):
                raise ValidationError("Unknown director option [%s]" % name)
            option = options.get(name)
            if option.name in normalized:
                raise ValidationError("Option [%s] is specified more than once, as [%s]" % (option.name, name))
            normalized[option.name] = _normalize_value(option, value)

        for option in options.ALL_OPTIONS:
            if option.required:
                value = normalized.get(option.name)
                if value is None or len(value.strip()) == 0:
                    raise ValidationError("Option [%s] is required" % option.property)

        if properties is None:
            properties = {}
        props = {}
        for key, value in properties.items():
            if key is None or len(str(key).strip()) == 0:
                raise ValidationError("Profile property keys must not be empty")
            props[str(key).strip()] = "" if value is None else str(value)

        return DirectorRequest(normalized,
                               _to_units(install),
                               _to_units(uninstall),
                               props)

    def get(self, option_name):
        """
        Returns the value of the specified option, or None if it was not set.
        Booleans that were not set are returned as False.
        """
        option = options.get(option_name)
        value = self._values.get(option.name)
        if value is None and option.kind in (options.BOOLEAN, options.MODIFIER):
            return False
        return value

    @property
    def install_units(self):
        return self._install_units

    @property
    def uninstall_units(self):
        return self._uninstall_units

    @property
    def properties(self):
        return dict(self._properties)

    def __str__(self):
        lines = ["%s=%s" % (option.property, self._values[option.name])
                 for option in options.ALL_OPTIONS
                 if option.name in self._values]
        lines.append("install=%s" % list(self._install_units))
        lines.append("uninstall=%s" % list(self._uninstall_units))
        lines.append("properties=%s" % self._properties)
        return "\n".join(lines)


def _normalize_value(option, value):
    if value is None:
        return None
    if option.kind in (options.BOOLEAN, options.MODIFIER):
        return argsupport.to_bool(value)
    # paths may be passed in as something other than str
    return str(value)


def _to_units(units):
    if units is None:
        return ()
    result = []
    for unit in units:
        if isinstance(unit, ium.InstallableUnit):
            result.append(unit)
        elif isinstance(unit, dict):
            result.append(ium.InstallableUnit.from_dict(unit))
        else:
            raise ValidationError("Cannot convert to installable unit [%s]" % unit)
    return tuple(result)
