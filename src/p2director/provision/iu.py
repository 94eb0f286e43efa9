"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause

This module has the abstraction for p2 installable units (IUs).
"""
from p2director.common import argsupport
from p2director.provision import ValidationError


FEATURE_GROUP_SUFFIX = ".feature.group"


class InstallableUnit(object):
    """
    Represents an IU to install or uninstall, in its structured form.
    """

    def __init__(self, id, version=None, feature=False):
        if id is None or len(str(id).strip()) == 0:
            raise ValidationError("Installable unit id must be set")
        self._id = str(id).strip()
        if version is not None:
            version = str(version).strip()
            if len(version) == 0:
                version = None
        self._version = version
        self._feature = argsupport.to_bool(feature)

    @classmethod
    def from_dict(cls, d):
        """
        Builds an InstallableUnit from a dict with the keys "id", "version"
        (optional) and "feature" (optional).
        """
        unknown_keys = set(d.keys()) - set(("id", "version", "feature"))
        if len(unknown_keys) > 0:
            raise ValidationError("Unknown installable unit attribute(s) %s" % sorted(unknown_keys))
        return InstallableUnit(d.get("id"), d.get("version"),
                               d.get("feature", False))

    @property
    def id(self):
        return self._id

    @property
    def version(self):
        return self._version

    @property
    def feature(self):
        return self._feature

    @property
    def unit_string(self):
        """
        The form the director expects: <id> [ '/' <version> ].

        For features, the id of the feature group IU is used, so
        .feature.group is appended to the id.
        """
        s = self._id
        if self._feature:
            s += FEATURE_GROUP_SUFFIX
        if self._version is not None:
            s += "/" + self._version
        return s

    def __hash__(self):
        return hash((self._id, self._version, self._feature))

    def __eq__(self, other):
        if not isinstance(other, InstallableUnit):
            return False
        return (self._id == other._id and
                self._version == other._version and
                self._feature == other._feature)

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return self.unit_string
