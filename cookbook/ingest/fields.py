"""Shape-checked accessors for loosely typed JSON-LD recipe fields.

Every function takes the decoded JSON object and a key and returns the
documented default when the key is missing or holds a value of the wrong
shape. None of them raise on bad input.
"""

from __future__ import annotations

from typing import Any, Dict, List


def string_field(obj: Dict[str, Any], key: str, default: str = "") -> str:
    value = obj.get(key)
    if isinstance(value, str):
        return value
    return default


def int_field(obj: Dict[str, Any], key: str, default: int = 0) -> int:
    """Integer value; free text such as "4 servings" yields the default."""
    value = obj.get(key)
    # bool is an int subclass but never a count
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def string_list_field(obj: Dict[str, Any], key: str) -> List[str]:
    value = obj.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def keywords_field(obj: Dict[str, Any], key: str = "keywords") -> str:
    """Keywords as one comma separated string.

    A list of strings is joined with ",", a plain string passes through.
    """
    value = obj.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(item for item in value if isinstance(item, str))
    return ""


def text_list_field(obj: Dict[str, Any], key: str) -> List[str]:
    """List field that may be a string, a list of strings or HowToStep objects.

    - ``"Stir."`` -> ``["Stir."]``
    - ``["Stir.", "Bake."]`` -> unchanged
    - ``[{"@type": "HowToStep", "text": "Stir."}]`` -> ``["Stir."]``

    Entries that are neither strings nor objects with a string ``text`` are
    skipped. Any other shape gives an empty list.
    """
    value = obj.get(key)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return []
    items: List[str] = []
    for entry in value:
        if isinstance(entry, str):
            items.append(entry)
        elif isinstance(entry, dict):
            text = entry.get("text")
            if isinstance(text, str):
                items.append(text)
    return items


def string_map_field(obj: Dict[str, Any], key: str) -> Dict[str, str]:
    value = obj.get(key)
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(v, str)}


def image_field(obj: Dict[str, Any]) -> str:
    # only the plain string forms are understood; ImageObject and lists are not
    if "imageUrl" in obj:
        return string_field(obj, "imageUrl")
    return string_field(obj, "image")
