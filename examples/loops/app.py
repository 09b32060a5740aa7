"""Loops and conditionals -- iterate a list, gate text on a flag.

Loads a template file, renders it against nested data, and shows how
blank lines left behind by block directives are collapsed.

Run:
    python app.py
"""

from pathlib import Path

from curlyplate import TemplateRenderer

template_path = Path(__file__).parent / "templates" / "report.txt"

data = {
    "user": {
        "name": "Ada",
        "isAdmin": False,
        "tasks": [
            {"title": "Write parser", "hours": 3, "done": True},
            {"title": "Write renderer", "hours": 2.5, "done": False},
            {"title": "Ship", "hours": 1.0, "done": False},
        ],
    }
}

renderer = TemplateRenderer(template_path.read_text(encoding="utf-8"), data)
output = renderer.render()


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
