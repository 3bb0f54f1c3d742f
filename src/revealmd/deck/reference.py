"""Authoring reference printed by -help."""

from __future__ import annotations

import textwrap

from revealmd.deck.generator import join_titles
from revealmd.deck.themes import THEMES, TRANSITIONS

_MARKDOWN_EXAMPLES = """\
Examples of markdown:

Slides

\tSlides are separated by a line holding only ---
\tvertical slides by a line holding only --

Images

\t![Title](path)

Tables

\t| Foo | Bar | Baz |
\t|-----|:---:|----:|
\t| 1   |  2  |   3 |
\t| 4   |  5  |   6 |

Code snippets

\t```python [1-2|3]
\tdef main():
\t    print("Hello, ")
\t    print("world!")
\t```

Fragments

\t- Item one
\t- Item two <!-- .element: class="fragment" data-fragment-index="1" -->
\t- Item three <!-- .element: class="fragment" data-fragment-index="2" -->

Speaker notes

\tNote: everything after this line is shown in the speaker view (press S)
"""


def _indented(text: str) -> str:
    wrapped = textwrap.wrap(text, width=72, break_long_words=False, break_on_hyphens=False)
    return "\n".join("\t" + line for line in wrapped)


def reference_text() -> str:
    """Return the theme, transition and markdown reference block."""
    return (
        "\nAvailable transitions:\n\n"
        f"{_indented(join_titles(list(TRANSITIONS)))}\n\n"
        "Available themes:\n\n"
        f"{_indented(join_titles(list(THEMES)))}\n\n"
        f"{_MARKDOWN_EXAMPLES}"
    )
