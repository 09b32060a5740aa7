"""Error diagnostics -- error codes, locations and source snippets.

Every curlyplate error carries an ``ErrorCode``; ``format_compact()``
renders a compiler-style diagnostic with the failing line. Colors follow
the terminal, ``NO_COLOR`` and ``FORCE_COLOR``.

Run:
    python app.py
"""

from curlyplate import Environment, TemplateError

env = Environment()

broken_sources = {
    "unclosed.txt": "Items:\n{{#loop items as item}}\n- {{ item }}\n",
    "mismatched.txt": "{{#if ready}}\nGo!\n{{/loop}}",
    "malformed.txt": "{{#loop items}}{{/loop}}",
}

syntax_errors: dict[str, TemplateError] = {}
for name, source in broken_sources.items():
    try:
        env.from_string(source, name=name)
    except TemplateError as exc:
        syntax_errors[name] = exc

profile = env.from_string("User: {{ user.name }}\nPlan: {{ user.plan.tier }}", name="profile.txt")
try:
    profile.render(user={"name": "Ada", "plan": {}})
except TemplateError as exc:
    render_error = exc
else:
    render_error = None


def main() -> None:
    for err in syntax_errors.values():
        print(err.format_compact())
        print()
    if render_error is not None:
        print(render_error.format_compact())


if __name__ == "__main__":
    main()
