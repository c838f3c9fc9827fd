#!/usr/bin/python

import os
import tempfile
import unittest

from tattler.shared import settings
from tattler.shared.error import SettingsError, SettingsValueError


settings_ini_contents = """
[SECTION_A]
value_1: 6.0
value_2: hello
value_3: true
value_4: FALSE
value_5: tRuE
value_6: falsE

[SECTION_B]
value_1: -5
value_2: 2.3
value_3: 0
value_4: 7
value_5:

[SECTION_C]
value_1: nobody@localhost
"""

shadow_config_ini_contents = """
[SECTION_C]
value_1: somebody@remotehost

[SECTION_D]
value_1: shadow only
"""


def create_config_file(prefix, contents):
    fd, path = tempfile.mkstemp(prefix=prefix, suffix='.ini', text=True)
    with os.fdopen(fd, 'w') as config_file:
        config_file.write(contents)
    return path


class settings_test(unittest.TestCase):
    # grab the singleton
    conf = settings.settings

    def setUp(self):
        self.global_path = create_config_file('global',
                                              settings_ini_contents)
        self.shadow_path = create_config_file('shadow',
                                              shadow_config_ini_contents)
        self.conf.set_config_files(self.global_path, self.shadow_path)

    def tearDown(self):
        os.remove(self.global_path)
        os.remove(self.shadow_path)
        self.conf.set_config_files(settings.DEFAULT_CONFIG_FILE,
                                   settings.DEFAULT_SHADOW_FILE)

    def test_float(self):
        val = self.conf.get_value("SECTION_A", "value_1", float)
        self.assertEqual(type(val), float)
        self.assertEqual(val, 6.0)

    def test_int(self):
        val = self.conf.get_value("SECTION_B", "value_1", int)
        self.assertEqual(type(val), int)
        self.assertTrue(val < 0)
        val = self.conf.get_value("SECTION_B", "value_3", int)
        self.assertEqual(val, 0)
        val = self.conf.get_value("SECTION_B", "value_4", int)
        self.assertTrue(val > 0)

    def test_string(self):
        val = self.conf.get_value("SECTION_A", "value_2")
        self.assertEqual(type(val), str)
        self.assertEqual(val, "hello")

    def test_override(self):
        val = self.conf.get_value("SECTION_C", "value_1")
        self.assertEqual(val, "somebody@remotehost")
        val = self.conf.get_value("SECTION_D", "value_1")
        self.assertEqual(val, "shadow only")

    def test_exception(self):
        self.assertRaises(SettingsValueError, self.conf.get_value,
                          "SECTION_B", "value_2", int)
        self.assertRaises(SettingsError, self.conf.get_value,
                          "SECTION_B", "missing")

    def test_boolean(self):
        val = self.conf.get_value("SECTION_A", "value_3", bool)
        self.assertEqual(val, True)
        val = self.conf.get_value("SECTION_A", "value_4", bool)
        self.assertEqual(val, False)
        val = self.conf.get_value("SECTION_A", "value_5", bool)
        self.assertEqual(val, True)
        val = self.conf.get_value("SECTION_A", "value_6", bool)
        self.assertEqual(val, False)

    def test_defaults(self):
        val = self.conf.get_value("MISSING", "foo", float, 3.6)
        self.assertEqual(val, 3.6)
        val = self.conf.get_value("SECTION_A", "novalue", str,
                                  "default")
        self.assertEqual(val, "default")

    def test_blank(self):
        val = self.conf.get_value("SECTION_B", "value_5", int, 4)
        self.assertEqual(val, 4)
        val = self.conf.get_value("SECTION_B", "value_5", int,
                                  allow_blank=True)
        self.assertEqual(val, 0)

    def test_override_and_reset(self):
        self.conf.override_value("SECTION_A", "value_2", "bye")
        self.conf.override_value("NEW_SECTION", "value_1", 12)
        self.assertEqual(self.conf.get_value("SECTION_A", "value_2"), "bye")
        self.assertEqual(self.conf.get_value("NEW_SECTION", "value_1", int),
                         12)
        self.conf.reset_values()
        self.assertEqual(self.conf.get_value("SECTION_A", "value_2"),
                         "hello")

    def test_missing_config_file(self):
        self.conf.set_config_files(self.global_path + '.missing', None)
        self.assertRaises(SettingsError, self.conf.get_value,
                          "SECTION_A", "value_2")


class shipped_config_test(unittest.TestCase):

    def test_shipped_values(self):
        conf = settings.Settings()
        conf.set_config_files(os.path.join(settings.package_dir,
                                           settings.settings_filename), None)
        self.assertEqual(conf.get_value('MOCK', 'default_name'), 'obj')
        self.assertEqual(conf.get_value('MOCK', 'debug', bool), False)
        self.assertEqual(conf.get_value('STUBBING', 'precedence'), 'latest')


# this is so the test can be run in standalone mode
if __name__ == '__main__':
    unittest.main()
