from formwrx.form.builder import FormBuilder


class Section(object):
    def __init__(self, title, *inputs):
        self.title = title
        self.inputs = inputs

    def render_input(self, input, builder: FormBuilder):
        return input.render(builder)

    def render_inputs(self, builder: FormBuilder):
        return "".join([self.render_input(i, builder) for i in self.inputs])

    def classes(self):
        return ["card", "form-section"]

    def render(self, builder: FormBuilder):
        return """
            <div class="{classes}">
                <div class="card-header">
                    {title}
                </div>
                <div class="card-body">
                    {inputs}
                </div>
            </div>
        """.format(
            classes=" ".join(self.classes()),
            title=self.title,
            inputs=self.render_inputs(builder),
        )
