"""Fix applicator: writes an exact-match token back into its declaration."""

from __future__ import annotations

from tokenguard.model.declaration import Declaration
from tokenguard.model.value import ValueTree, Word


def apply_fix(node: Word, tree: ValueTree, declaration: Declaration, token_name: str) -> bool:
    """Replace *node*'s text with *token_name* and re-serialize *tree*.

    Returns False, changing nothing, when the node already holds the token.
    """
    if node.value == token_name:
        return False
    node.value = token_name
    declaration.value = str(tree)
    return True
