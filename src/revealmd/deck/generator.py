"""Presentation shell generator — assembles title + files + template.

Takes the deck's filenames and reveal.js settings, fills the template
variables, and returns the HTML bytes served at "/".
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, StrictUndefined, Template, select_autoescape

from revealmd.paths import default_template


def join_titles(filenames: list[str]) -> str:
    """Join filenames into a readable title.

    One or two names are joined with " and "; longer lists get an
    Oxford comma: "a.md, b.md, and c.md".
    """
    if len(filenames) <= 2:
        return " and ".join(filenames)
    return ", ".join(filenames[:-1]) + ", and " + filenames[-1]


def derive_title(title: str | None, filenames: list[str]) -> str:
    """Return the explicit title, or one built from the filenames."""
    return title or join_titles(filenames)


def _environment() -> Environment:
    return Environment(
        autoescape=select_autoescape(default_for_string=True),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def load_template(path: Path | str | None = None) -> Template:
    """Load and compile the presentation template.

    Args:
        path: Custom template file. Defaults to the bundled template.

    Returns:
        Compiled jinja2 template.

    Raises:
        OSError: If the custom template cannot be read.
        jinja2.TemplateSyntaxError: If the template does not parse.
    """
    if path is None:
        source = default_template().read_text(encoding="utf-8")
    else:
        source = Path(path).read_text(encoding="utf-8")
    return _environment().from_string(source)


def render_shell(
    template: Template,
    title: str,
    filenames: list[str],
    theme: str,
    transition: str,
) -> bytes:
    """Render the presentation shell.

    Args:
        template: Compiled template from load_template().
        title: Presentation title.
        filenames: Markdown file names relative to the source directory.
        theme: reveal.js theme name.
        transition: reveal.js transition name.

    Returns:
        UTF-8 encoded HTML.

    Raises:
        jinja2.TemplateError: If the template fails while rendering,
            e.g. it references an unknown variable.
    """
    html = template.render(
        Title=title,
        Filenames=list(filenames),
        Filename=filenames[0] if filenames else "",
        Theme=theme,
        Transition=transition,
    )
    return html.encode("utf-8")
