"""Line classifier for the Hana markdown tokenizer.

Architecture:
lexer/
├── __init__.py          # Re-exports LineClassifier, LexerMode
├── core.py              # LineClassifier (mixin composition + dispatch)
├── modes.py             # LexerMode enum, marker constants
└── classifiers/         # Block-type classification mixins
    ├── heading.py       # ATX heading
    ├── thematic.py      # Horizontal rule
    ├── fence.py         # Fenced code
    └── list.py          # List markers

Usage:
    >>> from hana.lexer import LineClassifier
    >>> classifier = LineClassifier()
    >>> [classifier.classify(line, n) for n, line in enumerate(["# Hi", "", "x"], 1)]
    [LineToken(HEADING, 'Hi', 1), LineToken(BLANK_LINE, '', 2), LineToken(PARAGRAPH_LINE, 'x', 3)]

"""

from hana.lexer.core import LineClassifier
from hana.lexer.modes import LexerMode

__all__ = ["LexerMode", "LineClassifier"]
