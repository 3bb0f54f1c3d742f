"""Presentation shell rendering — template-driven reveal.js decks.

Turns a set of markdown files plus theme/transition choices into the
single HTML document served at "/". The markdown itself is never parsed
here: the shell points reveal.js' markdown plugin at each file and the
browser fetches them from the source directory.

Template variables:
    Title       presentation title
    Filenames   list of markdown file names, in argument order
    Filename    the first file name, for single-file templates
    Theme       reveal.js theme name
    Transition  reveal.js transition name
"""

DEFAULT_THEME = "league"
DEFAULT_TRANSITION = "fade"
