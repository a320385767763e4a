from abc import ABC, abstractmethod
from formwrx.form.builder import FormBuilder
from html import escape


class Input(ABC):
    # options consumed by the form library itself, never passed on to helpers
    reservedOptions = ["priority_countries", "label", "hint", "input_html", "wrapper_html", "required"]

    def __init__(self, id, label, infotext=None, options: dict = None, html_options: dict = None):
        self.id = id
        self.label = label
        self.infotext = infotext
        self.options = {} if options is None else options
        self.html_options = {} if html_options is None else html_options

    def get_type(self):
        return type(self).__name__.replace("Input", "").lower()

    def input_options(self):
        return {k: v for k, v in self.options.items() if k not in self.reservedOptions}

    def input_html_options(self):
        options = dict(self.options["input_html"]) if self.options.get("input_html") else {}
        options.update(self.html_options)
        return options

    def render_label(self, builder: FormBuilder):
        return '<label for="{id}">{label}</label>'.format(
            id=builder.dom_id(self.id),
            label=escape(self.label),
        )

    def render_errors(self, builder: FormBuilder):
        return "".join(
            '<div class="invalid-feedback">{msg}</div>'.format(msg=escape(msg)) for msg in builder.get_errors(self.id)
        )

    def render_hint(self):
        if not self.infotext:
            return ""
        return "<small>{text}</small>".format(text=self.infotext)

    def input_wrapping(self, builder: FormBuilder, content):
        return """
            <div class="form-group {type}" data-field="{id}" id="{dom_id}_input">
                {content}
                {errors}
                {hint}
            </div>
        """.format(
            type=self.get_type(),
            id=self.id,
            dom_id=builder.dom_id(self.id),
            content=content,
            errors=self.render_errors(builder),
            hint=self.render_hint(),
        )

    @abstractmethod
    def render_input(self, builder: FormBuilder):
        pass

    def render(self, builder: FormBuilder):
        return self.input_wrapping(builder, self.render_input(builder))
