"""Template introspection -- static analysis API.

Demonstrates required_context(), depends_on(), validate_context() and
comments(). These enable pre-render validation without executing the
template.

Run:
    python app.py
"""

from curlyplate import Environment

env = Environment()

template = env.from_string(
    "{{ # Invoice email # }}\n"
    "Hi {{ customer.name }},\n"
    "{{#loop invoice.lines as line}}\n"
    "{{ line.item }}: {{ line.amount }}\n"
    "{{/loop}}\n"
    "{{#if invoice.overdue}}Payment is overdue.{{/if}}\n"
    "-- {{ company }}",
    name="invoice.txt",
)

# What context variables does this template need?
required = template.required_context()

# All dependency paths (dotted names like "customer.name")
deps = template.depends_on()

# Validate a context dict before rendering -- catches missing vars early
missing_vars = template.validate_context({"customer": {"name": "Ada"}})

complete_context = {
    "customer": {"name": "Ada"},
    "invoice": {"lines": [{"item": "Widget", "amount": 9.5}], "overdue": False},
    "company": "ACME",
}
no_missing = template.validate_context(complete_context)

notes = template.comments()

lines = [
    f"Required context: {sorted(required)}",
    f"Dependencies: {sorted(deps)}",
    f"Missing (partial): {missing_vars}",
    f"Missing (complete): {no_missing}",
    f"Comments: {list(notes)}",
]
output = "\n".join(lines)


def main() -> None:
    print("=== Template Introspection ===\n")
    for line in lines:
        print(f"  {line}")
    print()
    print(template.render(complete_context))


if __name__ == "__main__":
    main()
