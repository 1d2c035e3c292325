"""Small helpers for config layering and naming"""
import copy
import re
from collections.abc import Mapping

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z]|\d|\b|_)|[A-Z]?[a-z]+|[A-Z]+|\d+")


def deep_merge(*layers) -> dict:
    """
    Merge mappings left to right into a new dict.

    Later layers win. Nested mappings are merged key by key; any other value
    (lists included) replaces what was there. Inputs are never modified and
    the result shares no mutable state with them.
    """
    result = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                result[key] = deep_merge(current, value)
            elif isinstance(value, Mapping):
                result[key] = deep_merge(value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def kebab_case(text: str) -> str:
    """SteamerPluginFoo / steamer_plugin foo -> steamer-plugin-foo"""
    return "-".join(word.lower() for word in _WORD.findall(text or ""))
