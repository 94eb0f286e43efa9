"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause
"""


class CommandLineArguments:
    """
    An ordered list of program arguments, built incrementally.
    """

    def __init__(self):
        self._args = []

    def add(self, *tokens):
        for token in tokens:
            self._args.append(str(token))

    def add_non_empty(self, flag, value):
        """
        Adds the flag followed by the value, unless the value is None or empty.
        """
        if value is None:
            return
        value = str(value)
        if len(value) > 0:
            self.add(flag, value)

    def add_flag_if_true(self, flag, value):
        if value:
            self.add(flag)

    def add_not_empty(self, flag, items, separator):
        """
        Adds the flag followed by the items joined using the separator, unless
        there are no items.
        """
        if len(items) > 0:
            self.add(flag, separator.join([str(i) for i in items]))

    def add_map_not_empty(self, flag, mapping, kv_separator, separator):
        """
        Adds the flag followed by the key/value pairs of the mapping, unless
        the mapping is empty. Keys and values are joined using the
        kv_separator, pairs are joined using the separator.
        """
        if len(mapping) > 0:
            self.add(flag, separator.join(
                ["%s%s%s" % (k, kv_separator, v) for k, v in mapping.items()]))

    def to_list(self):
        return list(self._args)

    def __len__(self):
        return len(self._args)

    def __str__(self):
        return " ".join(self._args)
