"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


Common argument processing.

Most director options are plain strings, but a few of them are comma
separated lists or comma separated key=value pairs.
"""
from p2director.provision import MalformedPropertyError
from p2director.provision import ValidationError


def split_csv(csv_str):
    """
    Splits the specified comma separated string into a list of trimmed values.

    Blank entries are dropped, so "a, ,b," returns ["a", "b"].
    Returns an empty list if csv_str is None.
    """
    if csv_str is None:
        return []
    tokens = [t.strip() for t in csv_str.split(",")]
    return [t for t in tokens if len(t) > 0]


def parse_properties_csv(csv_str):
    """
    Parses a comma separated list of key=value pairs, for example:

        org.eclipse.update.install.features=true,foo=bar

    Returns a dict, the order of the keys matches the order of the input.
    Only the first '=' separates key and value, so the value may contain '='.

    Raises a MalformedPropertyError for an entry without '=' or without a key.
    """
    properties = {}
    for entry in split_csv(csv_str):
        key, sep, value = entry.partition("=")
        key = key.strip()
        if len(sep) == 0 or len(key) == 0:
            raise MalformedPropertyError(entry)
        properties[key] = value.strip()
    return properties


def to_bool(thing):
    if thing is None:
        return False
    if isinstance(thing, bool):
        return thing
    if isinstance(thing, int):
        return False if thing == 0 else True
    if isinstance(thing, str):
        value = thing.strip().lower()
        if value in ("true", "on", "1"):
            return True
        if value in ("false", "off", "0", ""):
            return False
        raise ValidationError("Cannot convert to bool [%s], valid values are: true, false, on, off, 1, 0" % thing)
    raise ValidationError("Cannot convert to bool [%s]" % thing)
