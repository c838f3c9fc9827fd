"""
A singleton class for accessing global config values.

provides access to global configuration file.
"""

import configparser
import os
import sys

from tattler.shared.error import SettingsError, SettingsValueError


settings_filename = 'global_config.ini'

shared_dir = os.path.dirname(sys.modules[__name__].__file__)
package_dir = os.path.dirname(shared_dir)

# The config shipped with the package, replaced wholesale by
# TATTLER_CONFIG and overlaid by TATTLER_SHADOW_CONFIG
DEFAULT_CONFIG_FILE = os.environ.get('TATTLER_CONFIG',
                                     os.path.join(package_dir,
                                                  settings_filename))
DEFAULT_SHADOW_FILE = os.environ.get('TATTLER_SHADOW_CONFIG')


class Settings(object):
    _NO_DEFAULT_SPECIFIED = object()

    config = None
    config_file = DEFAULT_CONFIG_FILE
    shadow_file = DEFAULT_SHADOW_FILE

    def set_config_files(self, config_file=DEFAULT_CONFIG_FILE,
                         shadow_file=DEFAULT_SHADOW_FILE):
        self.config_file = config_file
        self.shadow_file = shadow_file
        self.config = None

    def _handle_no_value(self, section, key, default):
        if default is self._NO_DEFAULT_SPECIFIED:
            msg = ("Value '%s' not found in section '%s'" %
                   (key, section))
            raise SettingsError(msg)
        else:
            return default

    def get_value(self, section, key, type=str, default=_NO_DEFAULT_SPECIFIED,
                  allow_blank=False):
        self._ensure_config_parsed()

        try:
            val = self.config.get(section, key)
        except configparser.Error:
            return self._handle_no_value(section, key, default)

        if not val.strip() and not allow_blank:
            return self._handle_no_value(section, key, default)

        return self._convert_value(key, section, val, type)

    def override_value(self, section, key, new_value):
        """
        Override a value from the config file with a new value.
        """
        self._ensure_config_parsed()
        if not self.config.has_section(section):
            self.config.add_section(section)
        self.config.set(section, key, str(new_value))

    def reset_values(self):
        """
        Reset all values to those found in the config files (undoes all
        overrides).
        """
        self.parse_config_file()

    def _ensure_config_parsed(self):
        if self.config is None:
            self.parse_config_file()

    def merge_configs(self, shadow_config):
        # overwrite whats in config with whats in shadow_config
        for section in shadow_config.sections():
            if not self.config.has_section(section):
                self.config.add_section(section)
            for option in shadow_config.options(section):
                val = shadow_config.get(section, option)
                self.config.set(section, option, val)

    def parse_config_file(self):
        self.config = configparser.ConfigParser()
        if self.config_file and os.path.exists(self.config_file):
            self.config.read(self.config_file)
        else:
            raise SettingsError('%s not found' % (self.config_file))

        # the shadow file overwrites anything found in the main config
        if self.shadow_file and os.path.exists(self.shadow_file):
            shadow_config = configparser.ConfigParser()
            shadow_config.read(self.shadow_file)
            self.merge_configs(shadow_config)

    # the values that are pulled from ini
    # are strings.  But we should attempt to
    # convert them to other types if needed.
    def _convert_value(self, key, section, value, value_type):
        sval = value.strip()

        if len(sval) == 0:
            if value_type == str:
                return ""
            elif value_type == bool:
                return False
            elif value_type == int:
                return 0
            elif value_type == float:
                return 0.0
            else:
                return None

        if value_type == bool:
            if sval.lower() == "false":
                return False
            else:
                return True

        try:
            conv_val = value_type(sval)
            return conv_val
        except Exception:
            msg = ("Could not convert %s value %r in section %s to type %s" %
                   (key, sval, section, value_type))
            raise SettingsValueError(msg)


# insure the class is a singleton.  Now the symbol settings
# will point to the one and only one instace of the class
settings = Settings()
