"""Hello World -- the simplest curlyplate example.

Bind a template to its data and render it. No templates directory needed.

Run:
    python app.py
"""

from curlyplate import Environment, TemplateRenderer

renderer = TemplateRenderer("Hello, {{ name }}!", {"name": "World"})
output = renderer.render()

# Parse once, render many contexts
env = Environment()
template = env.from_string("Hello, {{ name }}!")


def main() -> None:
    print(output)
    print()

    for name in ["Ada", "Grace", "Linus"]:
        print(template.render(name=name))


if __name__ == "__main__":
    main()
