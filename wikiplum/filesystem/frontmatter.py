"""YAML front matter extraction for wiki pages."""

from __future__ import annotations

import logging

import yaml
from frontmatter.default_handlers import YAMLHandler
from yaml.constructor import ConstructorError

logger = logging.getLogger(__name__)

DELIMITER = "---"

_yaml_handler = YAMLHandler()

_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})


class FlatStringLoader(yaml.BaseLoader):
    """BaseLoader that keeps scalars as written, with two exceptions.

    A plain null scalar loads as ``""`` and a repeated mapping key is an
    error, so ``title: a`` followed by ``title: b`` is not front matter.
    """

    def construct_scalar(self, node: yaml.ScalarNode) -> str:
        value = super().construct_scalar(node)
        if node.style is None and value in _NULL_SCALARS:
            return ""
        return value

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict:
        if isinstance(node, yaml.MappingNode):
            seen: set[str] = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, str):
                    continue
                if key in seen:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def split_frontmatter(content: str) -> str | None:
    """Return the raw YAML block of *content*, or None when there is none.

    The document is stripped and split on the delimiter into at most three
    parts; the middle part is the block.  The split is textual, so a ``---``
    inside the YAML itself ends the block early.
    """
    content = content.strip()
    if not content.startswith(DELIMITER):
        return None

    parts = content.split(DELIMITER, 2)
    if len(parts) < 3:
        return None
    return parts[1].strip()


def parse_frontmatter(raw: bytes | str) -> dict[str, str] | None:
    """Parse the front matter of a markdown document into a flat mapping.

    Returns None when the document has no front matter.  Malformed front
    matter is treated the same way: invalid YAML, undecodable bytes, a block
    that is not a mapping, or a mapping with nested values all yield None
    rather than raising.

    Scalars keep the exact text written in the document (``draft: true``
    gives ``"true"``); plain nulls give ``""`` and duplicate keys are
    rejected, see ``FlatStringLoader``.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug("Front matter skipped: content is not valid UTF-8")
            return None

    block = split_frontmatter(raw)
    if block is None:
        return None

    try:
        data = _yaml_handler.load(block, Loader=FlatStringLoader)
    except yaml.YAMLError as exc:
        logger.debug("Front matter skipped: invalid YAML: %s", exc)
        return None

    if data is None:
        return None
    if not isinstance(data, dict):
        logger.debug("Front matter skipped: expected a mapping, got %s", type(data).__name__)
        return None

    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            logger.debug("Front matter skipped: non-scalar entry for %r", key)
            return None
        result[key] = value
    return result
