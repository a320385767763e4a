from abc import ABC, abstractmethod
from formwrx.config import Config


class CountrySelectCapability(ABC):
    """
    Implemented by form builders that can render a country ``<select>``.

    Implementations accept either of two argument shapes after ``method``:

    * ``(priority_countries, options, html_options)``
    * ``(options, html_options)``, with the priority countries passed as the
      ``"priority_countries"`` entry of ``options``
    """

    @abstractmethod
    def country_select(self, method, *args):
        pass


class FormBuilder(object):
    def __init__(self, object_name, data: dict = None, errors: dict = None, config: Config = None):
        self.object_name = object_name
        self.data = {} if data is None else data
        self.errors = {} if errors is None else errors
        self.config = config

    def get_config(self):
        return Config.get() if self.config is None else self.config

    @property
    def priority_countries(self):
        return self.get_config().get_value("priority_countries")

    def get_value(self, method):
        return self.data[method] if method in self.data else None

    def get_errors(self, method):
        return self.errors[method] if method in self.errors else []

    def dom_id(self, method):
        return "{0}_{1}".format(self.object_name, method)

    def supports(self, capability):
        return isinstance(self, capability)
