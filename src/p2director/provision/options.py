"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause


The options understood by the director application, and how each one is
turned into program arguments.
"""


# -<flag> <value>, if the value is not None and not empty
STRING = "string"

# -<flag>, if the value is True
BOOLEAN = "boolean"

# -<flag> <unit>,<unit>,...: merged from a csv string and structured units
UNITS = "units"

# -<flag> <key>=<value>,...: merged from a csv string and a structured dict
PROPERTIES = "properties"

# omitted if None, -<flag> if empty, -<flag> <value> otherwise
OPTIONAL_VALUE = "optional_value"

# not emitted, changes how another option is emitted
MODIFIER = "modifier"


ALL_KINDS = (STRING, BOOLEAN, UNITS, PROPERTIES, OPTIONAL_VALUE, MODIFIER)


class Option:
    """
    A single director option.


    The following attributes are available:

        name:
          The name of this option, used as the key in requests

        flag:
          The director program argument, for example "-installIU", or None for
          options that are not passed to the director

        kind:
          How the option is emitted, one of ALL_KINDS

        property:
          The name used on the command line, for example "p2.os" - defaults
          to the option name

        aliases:
          Additional names accepted for this option, typically the singular
          form, for example "repository" for "repositories"

        required:
          Whether a value must be provided

        help:
          The documentation for this option
    """
    def __init__(self, name, flag, kind, property=None, aliases=(),
                 required=False, help=None):
        assert kind in ALL_KINDS, "unknown option kind %s" % kind
        self.name = name
        self.flag = flag
        self.kind = kind
        self.property = name if property is None else property
        self.aliases = tuple(aliases)
        self.required = required
        self.help = help

    @property
    def all_names(self):
        names = [self.name]
        if self.property != self.name:
            names.append(self.property)
        return tuple(names) + self.aliases

    def __str__(self):
        return self.name

    __repr__ = __str__


DESTINATION = Option("destination", "-destination", STRING, required=True,
    help="The folder in which the targeted product is located")

METADATA_REPOSITORIES = Option("metadatarepositories", "-metadatarepository", STRING,
    aliases=("metadatarepository",),
    help="Comma separated list of URLs denoting meta-data repositories")

ARTIFACT_REPOSITORIES = Option("artifactrepositories", "-artifactrepository", STRING,
    aliases=("artifactrepository",),
    help="Comma separated list of URLs denoting artifact repositories")

REPOSITORIES = Option("repositories", "-repository", STRING,
    aliases=("repository",),
    help="Comma separated list denoting co-located meta-data and artifact repositories")

INSTALL_IUS = Option("installIUs", "-installIU", UNITS,
    aliases=("installIU",),
    help="Comma separated list of IUs to install, each entry in the list is in the form <id> [ '/' <version> ]")

UNINSTALL_IUS = Option("uninstallIUs", "-uninstallIU", UNITS,
    aliases=("uninstallIU",),
    help="Comma separated list of IUs to uninstall, each entry in the list is in the form <id> [ '/' <version> ]")

REVERT = Option("revert", "-revert", STRING,
    help="Comma separated list of numbers, reverts the installation to a previous state of the profile")

PURGE_HISTORY = Option("purgeHistory", "-purgeHistory", BOOLEAN,
    help="Remove the history of the profile registry")

LIST = Option("list", "-list", BOOLEAN,
    help="Lists all IUs found in the given repositories")

LIST_TAGS = Option("listTags", "-listTags", BOOLEAN,
    help="List the tags available")

LIST_INSTALLED_ROOTS = Option("listInstalledRoots", "-listInstalledRoots", BOOLEAN,
    help="Lists all root IUs found in the given profile")

LIST_FORMAT = Option("listFormat", "-listFormat", STRING,
    help="Formats the list of IUs according to the given string, use ${property} for variable parts, for example ${id} and ${version}")

PROFILE = Option("profile", "-profile", STRING,
    help="Defines what profile to use for the actions")

PROFILE_PROPERTIES = Option("profileproperties", "-profileproperties", PROPERTIES,
    help="Comma separated list of key=value pairs, effective only when a new profile is created")

IU_PROFILE_PROPERTIES = Option("iuProfileproperties", "-iuProfileproperties", STRING,
    help="Path to a properties file containing a list of IU profile properties to set")

FLAVOR = Option("flavor", "-flavor", STRING,
    help="Defines what flavor to use for a newly created profile")

BUNDLEPOOL = Option("bundlepool", "-bundlepool", STRING,
    help="The location where the plug-ins and features will be stored, effective only when a new profile is created")

P2_OS = Option("p2os", "-p2.os", STRING, property="p2.os",
    help="The OS to use when the profile is created")

P2_WS = Option("p2ws", "-p2.ws", STRING, property="p2.ws",
    help="The windowing system to use when the profile is created")

P2_ARCH = Option("p2arch", "-p2.arch", STRING, property="p2.arch",
    help="The architecture to use when the profile is created")

P2_NL = Option("p2nl", "-p2.nl", STRING, property="p2.nl",
    help="The language to use when the profile is created")

ROAMING = Option("roaming", "-roaming", BOOLEAN,
    help="Indicates that the product resulting from the installation can be moved, effective only when a new profile is created")

SHARED = Option("shared", "-shared", OPTIONAL_VALUE,
    help="Use a shared location for the install, the path defaults to ${user.home}/.p2")

TAG = Option("tag", "-tag", STRING,
    help="Tag the provisioning operation for easy referencing when reverting")

VERIFY_ONLY = Option("verifyOnly", "-verifyOnly", BOOLEAN,
    help="Only verify that the actions can be performed, don't actually install or remove anything")

DOWNLOAD_ONLY = Option("downloadOnly", "-downloadOnly", BOOLEAN,
    help="Only download the artifacts")

FOLLOW_REFERENCES = Option("followReferences", "-followReferences", BOOLEAN,
    help="Follow repository references")

VERBOSE_TRUST = Option("verboseTrust", "-verboseTrust", BOOLEAN,
    help="Print detailed information about the content trust")

TRUST_SIGNED_CONTENT_ONLY = Option("trustSignedContentOnly", "-trustSignedContentOnly", BOOLEAN,
    help="Trust each artifact only if it is jar-signed or PGP-signed")

TRUSTED_AUTHORITIES = Option("trustedAuthorities", "-trustedAuthorities", STRING,
    help="Comma separated list of the authorities from which repository content is trusted, an empty value rejects all remote connections")

TRUSTED_PGP_KEYS = Option("trustedPGPKeys", "-trustedPGPKeys", STRING,
    help="Comma separated list of the fingerprints of PGP keys to trust as signers of artifacts")

TRUSTED_CERTIFICATES = Option("trustedCertificates", "-trustedCertificates", STRING,
    help="The SHA-256 fingerprints of unanchored certificates to trust as signers of artifacts")

INSTALL_FEATURES = Option("installFeatures", None, MODIFIER,
    help="Adds org.eclipse.update.install.features=true to the profile properties")


# emission order
ALL_OPTIONS = (
    DESTINATION,
    METADATA_REPOSITORIES,
    ARTIFACT_REPOSITORIES,
    REPOSITORIES,
    INSTALL_IUS,
    UNINSTALL_IUS,
    REVERT,
    PURGE_HISTORY,
    LIST,
    LIST_TAGS,
    LIST_INSTALLED_ROOTS,
    LIST_FORMAT,
    PROFILE,
    PROFILE_PROPERTIES,
    IU_PROFILE_PROPERTIES,
    FLAVOR,
    BUNDLEPOOL,
    P2_OS,
    P2_WS,
    P2_ARCH,
    P2_NL,
    ROAMING,
    SHARED,
    TAG,
    VERIFY_ONLY,
    DOWNLOAD_ONLY,
    FOLLOW_REFERENCES,
    VERBOSE_TRUST,
    TRUST_SIGNED_CONTENT_ONLY,
    TRUSTED_AUTHORITIES,
    TRUSTED_PGP_KEYS,
    TRUSTED_CERTIFICATES,
    INSTALL_FEATURES,
)


_NAME_TO_OPTION = {}
for _option in ALL_OPTIONS:
    for _name in _option.all_names:
        assert _name not in _NAME_TO_OPTION, "duplicate option name %s" % _name
        _NAME_TO_OPTION[_name] = _option


def get(name):
    """
    Returns the Option for the specified option name, property name or alias.

    Raises an Exception for unknown names.
    """
    option = _NAME_TO_OPTION.get(name)
    if option is None:
        raise Exception("Unknown director option: %s" % name)
    return option


def is_known(name):
    return name in _NAME_TO_OPTION
