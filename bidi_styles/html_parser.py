from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import cssutils
from bs4 import BeautifulSoup, NavigableString, Tag

from .breakpoints import BreakpointTable, default_table
from .logical import LogicalPropertyResolver
from .rules import LTR, RTL
from .utilities import resolve_classes

DIRECTIONS = (LTR, RTL)


@dataclass
class HTMLNode:
    tag: str
    classes: List[str] = field(default_factory=list)
    children: List['HTMLNode'] = field(default_factory=list)
    text: Optional[str] = None
    attributes: Dict[str, str] = field(default_factory=dict)
    direction: str = LTR
    styles: Dict[str, str] = field(default_factory=dict)
    responsive_styles: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "classes": self.classes,
            "text": self.text,
            "attributes": self.attributes,
            "direction": self.direction,
            "styles": self.styles,
            "responsive_styles": self.responsive_styles,
            "children": [child.to_dict() for child in self.children],
        }


def element_direction(node: Tag, default: str = LTR) -> str:
    """Writing direction from the nearest ancestor-or-self ``dir`` attribute."""
    for element in [node, *node.parents]:
        if not isinstance(element, Tag):
            continue
        value = (element.get('dir') or '').strip().lower()
        if value in DIRECTIONS:
            return value
    return default


class HTMLParser:
    def __init__(self, resolver: Optional[LogicalPropertyResolver] = None, table: Optional[BreakpointTable] = None):
        self.resolver = resolver or LogicalPropertyResolver()
        self.table = table or default_table()

    def parse(self, html: str) -> HTMLNode:
        soup = BeautifulSoup(html, 'html.parser')
        return self._parse_node(soup.body) if soup.body else HTMLNode(tag='body')

    def _parse_node(self, node: Tag) -> HTMLNode:
        html_node = HTMLNode(
            tag=node.name,
            classes=node.get('class', []),
            attributes=self._get_attributes(node),
            direction=element_direction(node),
        )

        if node.string and node.string.strip():
            html_node.text = node.string.strip()

        self._apply_utility_classes(html_node)

        # Inline styles win over utility classes
        if 'style' in node.attrs:
            html_node.styles.update(self._parse_inline_styles(node['style']))

        for child in node.children:
            if isinstance(child, Tag):
                html_node.children.append(self._parse_node(child))
            elif isinstance(child, NavigableString) and child.strip():
                html_node.text = child.strip()

        return html_node

    def _apply_utility_classes(self, html_node: HTMLNode):
        resolved = resolve_classes(html_node.classes, self.resolver, self.table)
        for breakpoint, rule_sets in resolved.items():
            styles: Dict[str, str] = {}
            for rule_set in rule_sets:
                styles.update(rule_set.effective(html_node.direction))
            if breakpoint is None:
                html_node.styles.update(styles)
                continue
            region = self.table.scope_up(breakpoint, lambda: rule_sets)
            html_node.responsive_styles[breakpoint] = {
                "media": f"@media {region.condition}",
                "styles": styles,
            }

    def _get_attributes(self, node: Tag) -> Dict[str, str]:
        return {attr: node[attr] for attr in node.attrs if attr != 'class'}

    def _parse_inline_styles(self, style_str: str) -> Dict[str, str]:
        """Parse inline CSS styles into a dictionary"""
        sheet = cssutils.parseStyle(style_str)
        return {prop.name: prop.value for prop in sheet}
