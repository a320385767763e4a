import threading
import json
import os

import logging

logger = logging.getLogger(__name__)


class ConfigurationException(Exception):
    pass


class Config(object):
    sharedInstance = None
    creationLock = threading.Lock()
    environmentVariable = "FORMWRX_CONFIG"

    defaults = {
        # countries shown above the full list in country dropdowns
        "priority_countries": ["Australia", "Canada", "United Kingdom", "United States"],
    }

    @staticmethod
    def get():
        with Config.creationLock:
            if Config.sharedInstance is None:
                config = Config()
                file = os.environ.get(Config.environmentVariable)
                if file:
                    config.load(file)
                Config.sharedInstance = config
        return Config.sharedInstance

    @staticmethod
    def reset():
        with Config.creationLock:
            Config.sharedInstance = None

    def __init__(self, values: dict = None):
        self.values = {k: list(v) if isinstance(v, list) else v for k, v in Config.defaults.items()}
        if values is not None:
            self.values.update(values)

    def load(self, file):
        logger.info("Loading configuration from '{0}'".format(file))
        with open(file, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ConfigurationException("Configuration file '{0}' does not contain an object".format(file))
        self.values.update(data)

    def get_value(self, key, default=None):
        return self.values[key] if key in self.values else default

    def update(self, values):
        self.values.update(values)

    def __getitem__(self, key):
        return self.values[key]

    def __setitem__(self, key, value):
        self.values[key] = value

    def __delitem__(self, key):
        del self.values[key]

    def __contains__(self, key):
        return key in self.values
