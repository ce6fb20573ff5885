"""Demonstration of markup-escape.

This example showcases:
- Raw escaping with escape_text and its fast path
- The escaping policy and the Markup safe text type
- Composing Markup values without double escaping
- Rendering f-string and Jinja2 templates in HTML mode
"""

from markup_escape import EscapeConfig
from markup_escape import EscapingPolicy
from markup_escape import Markup
from markup_escape import escape
from markup_escape import escape_text
from markup_escape import scan_text
from markup_escape.templating import EscapeMode
from markup_escape.templating import TemplateFormat
from markup_escape.templating import get_renderer


def demo_escape_text() -> None:
    """Escape raw text."""
    print("\n=== escape_text ===")
    text = '<b>"Tom" & \'Jerry\'</b>'
    scan = scan_text(text)
    print(f"Input:   {text}")
    print(f"Matches: {scan.match_count}, output length {scan.output_length(len(text))}")
    print(f"Output:  {escape_text(text)}")

    clean = "nothing to escape here"
    print(f"Clean input returned as is: {escape_text(clean) is clean}")


def demo_policy() -> None:
    """Escape arbitrary values through the policy."""
    print("\n=== escape / EscapingPolicy ===")
    for value in ["<script>", 42, 3.5, None, Markup("<em>trusted</em>")]:
        print(f"{value!r:>28} -> {escape(value)!r}")

    strict = EscapingPolicy(Markup, EscapeConfig(scalar_bypass=False))
    print(f"Without scalar bypass: {strict.decide(42)} -> {strict.escape_value(42)!r}")


def demo_markup() -> None:
    """Compose Markup values."""
    print("\n=== Markup ===")
    item = Markup("<li>{}</li>")
    items = Markup("").join(item.format(name) for name in ["<a>", "b & c"])
    print(Markup("<ul>%s</ul>") % items)
    print(Markup("<em>Hello</em> ") + "<world>")


def demo_templates() -> None:
    """Render templates with escaping."""
    print("\n=== Templates ===")
    variables = {"user": "<Mallory>", "bio": Markup("<i>trusted</i>")}

    f_string = get_renderer(TemplateFormat.F_STRING, EscapeMode.HTML)
    print(f_string.render("<p>{user}: {bio}</p>", variables))

    jinja = get_renderer(TemplateFormat.JINJA2, EscapeMode.HTML)
    print(jinja.render("<p>{{ user }}: {{ bio }}</p>", variables))


def main() -> None:
    """Run all demonstrations."""
    demo_escape_text()
    demo_policy()
    demo_markup()
    demo_templates()


if __name__ == "__main__":
    main()
