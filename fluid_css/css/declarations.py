"""
Declaration blocks and stylesheets.

A small document model over tinycss2: enough structure to find declarations,
replace their values and serialize the result. Comments are kept, both
inside values, since fluid values carry their provenance in one, and between
declarations and rules.
"""

import logging
from typing import Callable, Iterator, List, Optional, Union

import tinycss2

logger = logging.getLogger(__name__)

# At-rules whose blocks hold rules rather than declarations
NESTED_RULE_AT_KEYWORDS = {'media', 'container', 'supports', 'layer', 'document', 'scope'}

INDENT = '  '


class Declaration:
    """A single `property: value` pair."""

    def __init__(self, prop: str, value: str, important: bool = False):
        """
        Initialize a declaration.

        Args:
            prop: Property name
            value: Property value (without !important)
            important: Whether the declaration is !important
        """
        self.prop = prop
        self.value = value
        self.important = important

    @property
    def css_text(self) -> str:
        return f"{self.prop}: {self.value}{' !important' if self.important else ''};"

    def __repr__(self) -> str:
        return f"Declaration({self.prop!r}, {self.value!r})"


class Comment:
    """A comment between declarations or rules, kept so it can be written back."""

    def __init__(self, text: str):
        """
        Initialize a comment.

        Args:
            text: Comment body, without the /* */ delimiters
        """
        self.text = text

    @property
    def css_text(self) -> str:
        return f"/*{self.text}*/"

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        pass

    def serialize(self, depth: int = 0) -> str:
        return f"{INDENT * depth}{self.css_text}"

    def __repr__(self) -> str:
        return f"Comment({self.text!r})"


class DeclarationBlock:
    """An ordered list of declarations, such as the body of a style rule."""

    def __init__(self, items: Optional[List[Union[Declaration, Comment]]] = None):
        self.items: List[Union[Declaration, Comment]] = list(items or [])

    @property
    def declarations(self) -> List[Declaration]:
        """Get the declarations, without comments."""
        return [item for item in self.items if isinstance(item, Declaration)]

    @classmethod
    def parse(cls, content: Union[str, list]) -> 'DeclarationBlock':
        """
        Parse declarations from CSS text or tinycss2 tokens.

        Args:
            content: Declaration list, e.g. 'font-size: 1rem; margin: 0'

        Returns:
            DeclarationBlock: Parsed declarations and comments
        """
        block = cls()
        nodes = tinycss2.parse_declaration_list(content, skip_comments=False,
                                                skip_whitespace=True)
        for node in nodes:
            if node.type == 'declaration':
                value = tinycss2.serialize(node.value).strip()
                block.items.append(Declaration(node.name, value, node.important))
            elif node.type == 'comment':
                block.items.append(Comment(node.value))
            elif node.type == 'error':
                logger.warning(f"Skipping invalid declaration: {node.message}")
        return block

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        """Call callback with every declaration, in order."""
        for declaration in self.declarations:
            callback(declaration)

    def get(self, prop: str) -> Optional[str]:
        """Get the value of the last declaration of a property."""
        for declaration in reversed(self.declarations):
            if declaration.prop == prop:
                return declaration.value
        return None

    def set(self, prop: str, value: str) -> None:
        """Set a property, replacing the last existing declaration of it."""
        for declaration in reversed(self.declarations):
            if declaration.prop == prop:
                declaration.value = value
                return
        self.items.append(Declaration(prop, value))

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def serialize(self, depth: int = 0) -> str:
        indent = INDENT * depth
        return '\n'.join(f"{indent}{item.css_text}" for item in self.items)

    @property
    def css_text(self) -> str:
        return self.serialize()


class StyleRule:
    """A selector with its declaration block."""

    def __init__(self, selector: str, block: DeclarationBlock):
        self.selector = selector
        self.block = block

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        self.block.walk_decls(callback)

    def serialize(self, depth: int = 0) -> str:
        indent = INDENT * depth
        body = self.block.serialize(depth + 1)
        return f"{indent}{self.selector} {{\n{body}\n{indent}}}"


class AtRule:
    """
    An at-rule, holding nested rules (@media, @container, ...), a
    declaration block (@font-face, ...) or nothing (@import).
    """

    def __init__(self, at_keyword: str, prelude: str,
                 rules: Optional[List[Union[StyleRule, 'AtRule', Comment]]] = None,
                 block: Optional[DeclarationBlock] = None):
        self.at_keyword = at_keyword
        self.prelude = prelude
        self.rules = rules
        self.block = block

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        if self.block is not None:
            self.block.walk_decls(callback)
        for rule in self.rules or []:
            rule.walk_decls(callback)

    def serialize(self, depth: int = 0) -> str:
        indent = INDENT * depth
        head = f"{indent}@{self.at_keyword}{' ' + self.prelude if self.prelude else ''}"
        if self.rules is not None:
            body = '\n'.join(rule.serialize(depth + 1) for rule in self.rules)
        elif self.block is not None:
            body = self.block.serialize(depth + 1)
        else:
            return f"{head};"
        return f"{head} {{\n{body}\n{indent}}}"


class Stylesheet:
    """A parsed stylesheet."""

    def __init__(self, rules: Optional[List[Union[StyleRule, AtRule, Comment]]] = None):
        self.rules: List[Union[StyleRule, AtRule, Comment]] = list(rules or [])

    @classmethod
    def parse(cls, css_content: str) -> 'Stylesheet':
        """
        Parse a stylesheet.

        Args:
            css_content: CSS source

        Returns:
            Stylesheet: Parsed stylesheet
        """
        # Comments have to survive tokenizing so values keep theirs
        nodes = tinycss2.parse_stylesheet(css_content, skip_comments=False,
                                          skip_whitespace=True)
        stylesheet = cls(_convert_rules(nodes))
        logger.debug(f"Parsed stylesheet with {len(stylesheet.rules)} top-level rules")
        return stylesheet

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        """Call callback with every declaration in every rule."""
        for rule in self.rules:
            rule.walk_decls(callback)

    @property
    def css_text(self) -> str:
        return '\n\n'.join(rule.serialize() for rule in self.rules) + '\n'


def _convert_rules(nodes: list) -> List[Union[StyleRule, AtRule, Comment]]:
    rules: List[Union[StyleRule, AtRule, Comment]] = []
    for node in nodes:
        if node.type == 'qualified-rule':
            selector = tinycss2.serialize(node.prelude).strip()
            rules.append(StyleRule(selector, DeclarationBlock.parse(node.content)))
        elif node.type == 'at-rule':
            rules.append(_convert_at_rule(node))
        elif node.type == 'comment':
            rules.append(Comment(node.value))
        elif node.type == 'error':
            logger.warning(f"Skipping invalid rule: {node.message}")
    return rules


def _convert_at_rule(node) -> AtRule:
    prelude = tinycss2.serialize(node.prelude).strip()
    if node.content is None:
        return AtRule(node.at_keyword, prelude)
    if node.lower_at_keyword in NESTED_RULE_AT_KEYWORDS:
        nested = tinycss2.parse_rule_list(node.content, skip_comments=False,
                                          skip_whitespace=True)
        return AtRule(node.at_keyword, prelude, rules=_convert_rules(nested))
    return AtRule(node.at_keyword, prelude, block=DeclarationBlock.parse(node.content))
