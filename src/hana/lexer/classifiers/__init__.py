"""Block-level line classifiers for the Hana lexer.

Each classifier is a mixin that provides classification logic for
a specific block type. Classifiers inspect one line and either return
a LineToken or None.
"""

from hana.lexer.classifiers.fence import (
    FenceClassifierMixin,
)
from hana.lexer.classifiers.heading import (
    HeadingClassifierMixin,
)
from hana.lexer.classifiers.list import (
    ListClassifierMixin,
)
from hana.lexer.classifiers.thematic import (
    ThematicClassifierMixin,
)

__all__ = [
    "FenceClassifierMixin",
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "ThematicClassifierMixin",
]
