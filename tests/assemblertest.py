"""
Copyright (c) 2025, salesforce.com, inc.
All rights reserved.
SPDX-License-Identifier: BSD-3-Clause
For full license text, see the LICENSE file in the repo root or https://opensource.org/licenses/BSD-3-Clause
"""

from p2director.provision import DirectorFailure
from p2director.provision import EXIT_OK
from p2director.provision import MalformedPropertyError
from p2director.provision import ProvisioningClient
from p2director.provision import assembler
from p2director.provision import options
from p2director.provision import request
import unittest


DESTINATION = ["-destination", "/opt/app"]


class AssemblerTest(unittest.TestCase):

    def test_destination_only(self):
        args = self._assemble()

        self.assertEqual(DESTINATION, args)

    def test_boolean_options(self):
        boolean_options = [o for o in options.ALL_OPTIONS
                           if o.kind == options.BOOLEAN]
        self.assertEqual(10, len(boolean_options))
        for option in boolean_options:
            self.assertEqual(DESTINATION, self._assemble(**{option.name: False}))
            self.assertEqual(DESTINATION, self._assemble())

            args = self._assemble(**{option.name: True})

            self.assertEqual(DESTINATION + [option.flag], args)

    def test_string_options(self):
        string_options = [o for o in options.ALL_OPTIONS
                          if o.kind == options.STRING and not o.required]
        for option in string_options:
            self.assertEqual(DESTINATION, self._assemble(**{option.name: None}))
            self.assertEqual(DESTINATION, self._assemble(**{option.name: ""}))

            args = self._assemble(**{option.name: "some value"})

            self.assertEqual(DESTINATION + [option.flag, "some value"], args)

    def test_p2_options_use_dotted_flags(self):
        args = self._assemble(p2os="linux", p2ws="gtk", p2arch="x86_64", p2nl="en")

        self.assertEqual(DESTINATION + ["-p2.os", "linux", "-p2.ws", "gtk",
                                        "-p2.arch", "x86_64", "-p2.nl", "en"],
                         args)

    def test_repository_flags_are_singular(self):
        args = self._assemble(metadatarepositories="http://m",
                              artifactrepositories="http://a",
                              repositories="http://r1,http://r2")

        self.assertEqual(DESTINATION + ["-metadatarepository", "http://m",
                                        "-artifactrepository", "http://a",
                                        "-repository", "http://r1,http://r2"],
                         args)

    def test_trusted_authorities_is_emitted_once(self):
        args = self._assemble(trustedAuthorities="https://download.eclipse.org")

        self.assertEqual(1, args.count("-trustedAuthorities"))

    def test_install_units__csv_and_structured(self):
        args = self._assemble(installIUs="a,b",
                              install=[{"id": "c", "feature": True, "version": "1.0"}])

        self.assertEqual(DESTINATION + ["-installIU", "a,b,c.feature.group/1.0"], args)

    def test_install_units__csv_is_trimmed(self):
        args = self._assemble(installIUs=" a , b/1.0 ")

        self.assertEqual(DESTINATION + ["-installIU", "a,b/1.0"], args)

    def test_install_units__structured_only(self):
        args = self._assemble(install=[{"id": "a"}, {"id": "b", "version": "2"}])

        self.assertEqual(DESTINATION + ["-installIU", "a,b/2"], args)

    def test_install_units__empty(self):
        self.assertEqual(DESTINATION, self._assemble(installIUs=""))
        self.assertEqual(DESTINATION, self._assemble(installIUs=" , "))
        self.assertEqual(DESTINATION, self._assemble(install=[]))

    def test_uninstall_units_use_their_own_structured_list(self):
        args = self._assemble(uninstallIUs="x",
                              install=[{"id": "a"}],
                              uninstall=[{"id": "y", "feature": True}])

        self.assertEqual(DESTINATION + ["-installIU", "a",
                                        "-uninstallIU", "x,y.feature.group"],
                         args)

    def test_shared__absent(self):
        args = self._assemble()

        self.assertNotIn("-shared", args)

    def test_shared__default_location(self):
        args = self._assemble(shared="")

        self.assertEqual(DESTINATION + ["-shared"], args)

    def test_shared__path(self):
        args = self._assemble(shared="/x")

        self.assertEqual(DESTINATION + ["-shared", "/x"], args)

    def test_shared__default_location_followed_by_other_flags(self):
        args = self._assemble(shared="", tag="initial")

        self.assertEqual(DESTINATION + ["-shared", "-tag", "initial"], args)

    def test_profile_properties__structured_overrides_csv(self):
        args = self._assemble(profileproperties="k=1",
                              properties={"k": "2"})

        self.assertEqual(DESTINATION + ["-profileproperties", "k=2"], args)

    def test_profile_properties__order_is_preserved(self):
        args = self._assemble(profileproperties="a=1,b=2,c=3",
                              properties={"b": "20", "d": "4"})

        self.assertEqual(DESTINATION + ["-profileproperties", "a=1,b=20,c=3,d=4"], args)

    def test_profile_properties__install_features(self):
        args = self._assemble(installFeatures=True)

        self.assertEqual(DESTINATION + ["-profileproperties",
                                        "org.eclipse.update.install.features=true"],
                         args)

    def test_profile_properties__install_features_overrides_other_values(self):
        args = self._assemble(profileproperties="org.eclipse.update.install.features=false,a=1",
                              properties={"org.eclipse.update.install.features": "no"},
                              installFeatures=True)

        self.assertEqual(DESTINATION + ["-profileproperties",
                                        "org.eclipse.update.install.features=true,a=1"],
                         args)

    def test_profile_properties__install_features_false(self):
        args = self._assemble(installFeatures=False)

        self.assertEqual(DESTINATION, args)

    def test_profile_properties__empty(self):
        self.assertEqual(DESTINATION, self._assemble(profileproperties=""))
        self.assertEqual(DESTINATION, self._assemble(properties={}))

    def test_profile_properties__malformed_entry(self):
        with self.assertRaises(MalformedPropertyError) as ctx:
            self._assemble(profileproperties="a=1,b")

        self.assertEqual("b", ctx.exception.entry)

    def test_emission_order(self):
        args = self._assemble(trustedCertificates="cert",
                              tag="t",
                              roaming=True,
                              profile="SDKProfile",
                              repositories="http://r",
                              installIUs="a",
                              verifyOnly=True,
                              bundlepool="/pool",
                              list=True)

        self.assertEqual(DESTINATION + ["-repository", "http://r",
                                        "-installIU", "a",
                                        "-list",
                                        "-profile", "SDKProfile",
                                        "-bundlepool", "/pool",
                                        "-roaming",
                                        "-tag", "t",
                                        "-verifyOnly",
                                        "-trustedCertificates", "cert"],
                         args)

    def test_execute__success(self):
        client = _FakeClient(EXIT_OK)
        req = request.DirectorRequest.new({"destination": "/opt/app",
                                           "installIUs": "my.feature/1.2.3"})

        args = assembler.execute(req, client)

        expected = ["-destination", "/opt/app", "-installIU", "my.feature/1.2.3"]
        self.assertEqual(expected, args)
        self.assertEqual([expected], client.invocations)

    def test_execute__failure(self):
        client = _FakeClient(13)
        req = request.DirectorRequest.new({"destination": "/opt/app",
                                           "installIUs": "my.feature/1.2.3"})

        with self.assertRaises(DirectorFailure) as ctx:
            assembler.execute(req, client)

        self.assertEqual(13, ctx.exception.status)
        self.assertEqual("-destination /opt/app -installIU my.feature/1.2.3",
                         ctx.exception.arguments)
        self.assertEqual("Call to p2 director application failed with exit code 13. Program arguments were: '-destination /opt/app -installIU my.feature/1.2.3'.",
                         str(ctx.exception))
        self.assertEqual(1, len(client.invocations))

    def test_execute__none_status_is_a_failure(self):
        client = _FakeClient(None)
        req = request.DirectorRequest.new({"destination": "/opt/app"})

        with self.assertRaises(DirectorFailure) as ctx:
            assembler.execute(req, client)

        self.assertIsNone(ctx.exception.status)
        self.assertIn("exit code None", str(ctx.exception))

    def test_execute__false_status_is_a_failure(self):
        client = _FakeClient(False)
        req = request.DirectorRequest.new({"destination": "/opt/app"})

        with self.assertRaises(DirectorFailure):
            assembler.execute(req, client)

    def test_execute__malformed_property_does_not_invoke_the_director(self):
        client = _FakeClient(EXIT_OK)
        req = request.DirectorRequest.new({"destination": "/opt/app",
                                           "profileproperties": "oops"})

        with self.assertRaises(MalformedPropertyError):
            assembler.execute(req, client)

        self.assertEqual(0, len(client.invocations))

    def _assemble(self, install=(), uninstall=(), properties=None, **values):
        values["destination"] = "/opt/app"
        req = request.DirectorRequest.new(values, install, uninstall, properties)
        return assembler.assemble(req).to_list()


class _FakeClient(ProvisioningClient):

    def __init__(self, status):
        self.status = status
        self.invocations = []

    def invoke(self, args):
        self.invocations.append(list(args))
        return self.status


if __name__ == '__main__':
    unittest.main()
