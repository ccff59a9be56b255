#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os


class Env:
    """Env - process environment and runtime configuration"""

    _instance = None

    # Defaults for keys of etc/boot/config.props
    _DEFAULTS = {
        "namespace": "boot",
        "logLevel": "info",
    }

    def __init__(self, workDir=None):
        self._workDir = workDir
        self._propsCache = None

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def workDir(self):
        """Get working directory as a path string."""
        return self._workDir if self._workDir is not None else os.getcwd()

    def vars(self):
        """Return environment variables as a dict copy."""
        return dict(os.environ)

    def config(self, key, defVal=None):
        """Get configuration value.

        Lookup order:
          1. BOOT_<KEY> environment variable (key upper-cased)
          2. etc/boot/config.props under workDir
          3. defVal, then the built-in default for key

        Args:
            key: Config key
            defVal: Default value if not found

        Returns:
            Config value or default
        """
        val = os.environ.get(f"BOOT_{key.upper()}")
        if val is not None:
            return val

        val = self.props().get(key)
        if val is not None:
            return val

        if defVal is not None:
            return defVal
        return Env._DEFAULTS.get(key)

    def props(self):
        """Load etc/boot/config.props once and cache it."""
        if self._propsCache is None:
            path = os.path.join(self.workDir(), "etc", "boot", "config.props")
            self._propsCache = Env._readProps(path) if os.path.isfile(path) else {}
        return self._propsCache

    @staticmethod
    def _readProps(path):
        """Parse a props file: name=value lines, '#' and '//' comments."""
        props = {}
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or line.startswith("//"):
                    continue
                eq = line.find("=")
                if eq < 0:
                    continue
                props[line[:eq].strip()] = line[eq + 1:].strip()
        return props
