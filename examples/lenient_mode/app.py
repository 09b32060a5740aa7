"""Strict vs lenient rendering of incomplete data.

Strict mode (the default) fails fast on missing, null or wrongly-typed
data. Lenient mode renders the same gaps as empty text, which suits
optional fields in user-supplied content.

Run:
    python app.py
"""

from curlyplate import TemplateRenderer, UndefinedError

source = "Name: {{ user.name }}\nEmail: {{ user.email }}\nTags: {{#loop user.tags as tag}}{{ tag }} {{/loop}}"
data = {"user": {"name": "Ada", "email": None}}

try:
    TemplateRenderer(source, data).render()
except UndefinedError as exc:
    strict_error = exc
else:
    strict_error = None

output = TemplateRenderer(source, data, {"strict_var_mode": False}).render()


def main() -> None:
    print(f"strict:  {strict_error}")
    print("lenient:")
    print(output)


if __name__ == "__main__":
    main()
