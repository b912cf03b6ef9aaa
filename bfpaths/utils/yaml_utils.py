"""Helpers for YAML parsing quirks in graph files."""

from collections.abc import Hashable
from typing import Any, Dict, Tuple

import yaml
from yaml.constructor import ConstructorError


def normalize_node_ref(value: Any) -> Any:
    """Return a node reference as a string.

    YAML 1.1 turns bare ``yes``/``no``/``on``/``off``/``true``/``false`` into
    booleans and digits into ints. Node ids from graph files are always
    strings, so such values are converted back (``True`` -> ``"True"``,
    ``3`` -> ``"3"``). Non-scalar values are returned unchanged so that
    schema validation can reject them.
    """
    if isinstance(value, (bool, int, float, str)):
        return str(value)
    return value


class StringKeyLoader(yaml.SafeLoader):
    """Safe loader that turns every scalar mapping key into a string.

    Keys are converted while the mapping is built. Converting after
    ``yaml.safe_load`` is too late: ``1``, ``true`` and ``1.0`` are equal as
    Python keys and would already have been merged into one entry.

    Two different key spellings that convert to the same string (``yes`` and
    ``true`` both become ``"True"``) raise a ``ConstructorError``. Repeating
    the same spelling keeps the last value, as plain YAML loading does.

    Examples:
        >>> yaml.load("{1: a, 1.0: b, yes: c}", Loader=StringKeyLoader)
        {'1': 'a', '1.0': 'b', 'True': 'c'}
    """

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)

        mapping: Dict[Hashable, Any] = {}
        spellings: Dict[Hashable, Tuple[str, Any]] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            if isinstance(key_node, yaml.ScalarNode):
                key = str(key)
            elif not isinstance(key, Hashable):
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                )

            spelling = (key_node.tag, key_node.value)
            if key in spellings and spellings[key] != spelling:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"keys {spellings[key][1]!r} and {key_node.value!r} "
                    f"both resolve to {key!r}",
                    key_node.start_mark,
                )
            spellings[key] = spelling
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def load_yaml_with_string_keys(text: str) -> Any:
    """Parse ``text`` with `StringKeyLoader`.

    Raises:
        yaml.YAMLError: If the text is not valid YAML or two keys of one
            mapping collide after conversion to strings.
    """
    return yaml.load(text, Loader=StringKeyLoader)
