from formwrx.form.input import Input
from formwrx.form.builder import FormBuilder, CountrySelectCapability
from formwrx.form.error import MissingCapabilityException

import logging

logger = logging.getLogger(__name__)


class CountryInput(Input):
    """
    A country dropdown that delegates the ``<select>`` to the builder's
    ``country_select`` helper.

    Priority countries are taken from the ``priority_countries`` option of the
    input, falling back to the ``priority_countries`` configuration value:

        CountryInput("nationality", "Country", options={"priority_countries": ["Australia", "New Zealand"]})

    The helper may or may not make use of them.
    """

    pluginUrl = "https://github.com/stefanpenner/country_select"

    def render(self, builder: FormBuilder):
        if not builder.supports(CountrySelectCapability):
            raise MissingCapabilityException(
                "To use the country input, please install a country_select plugin, like this one: {0}".format(
                    self.pluginUrl
                )
            )
        return super().render(builder)

    def render_input(self, builder: FormBuilder):
        # label and select must stay adjacent
        return self.render_label(builder) + self.country_select_helper(builder)

    def priority_countries(self, builder: FormBuilder):
        if "priority_countries" in self.options and self.options["priority_countries"] is not None:
            return self.options["priority_countries"]
        return builder.priority_countries

    # version 2 of stefanpenner/country_select expects the priority countries in the options.
    # detecting which api the helper has is not possible (same signature, version constants are
    # specific to a single plugin), so the older api is the default and subclasses may switch.
    def priority_countries_as_argument(self):
        return True

    def country_select_helper(self, builder: FormBuilder):
        priority_countries = self.priority_countries(builder)
        if self.priority_countries_as_argument():
            logger.debug("Rendering %s with priority countries as argument", self.id)
            return builder.country_select(
                self.id, priority_countries, self.input_options(), self.input_html_options()
            )
        logger.debug("Rendering %s with priority countries as option", self.id)
        return builder.country_select(
            self.id, self.input_options_with_priority_countries(priority_countries), self.input_html_options()
        )

    def input_options_with_priority_countries(self, priority_countries):
        options = self.input_options()
        options["priority_countries"] = priority_countries
        return options


class CountryOptionInput(CountryInput):
    def priority_countries_as_argument(self):
        return False

    def get_type(self):
        return "country"
