# ABOUTME: Line grammar for non-English metadata stored in a record's shared "extra" text field.
# ABOUTME: parse() reads recognized lines into a MetadataObject; serialize() rewrites them in place of the old ones.

"""Extra-field grammar, version 2.

Recognized lines (keys are case-insensitive, ``:`` or ``=`` delimits the value)::

    cne-original-language: zh-CN
    cne-title-original: 清代以來三峽地區水旱災害的初步研究
    cne-title-romanized-short: Qingdai yilai
    cne-creator-0-last-original: 華
    cne-creator-0-options-force-comma: true

Version 1 wrote ``cne.title-original: ...``; those lines are still read and are
rewritten in version 2 spelling on the next serialize. Everything else in the
field, including lines that start with the namespace but fail validation, is
opaque and kept verbatim.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from cnemeta.metadata.types import (
    AUTHOR_NAME_PARTS,
    CneFieldName,
    FieldVariant,
    MetadataObject,
    normalize_value,
)

GRAMMAR_VERSION = 2
DEFAULT_NAMESPACE = "cne"

ORIGINAL_LANGUAGE_KEY = "original-language"

# Wire spelling of each variant.
VARIANT_TOKENS: dict[FieldVariant, str] = {
    FieldVariant.ORIGINAL: "original",
    FieldVariant.ROMANIZED: "romanized",
    FieldVariant.ROMANIZED_SHORT: "romanized-short",
    FieldVariant.ENGLISH: "english",
}

_TOKEN_TO_VARIANT: dict[str, FieldVariant] = {
    token: variant for variant, token in VARIANT_TOKENS.items()
}
# Spelling used by early releases.
_TOKEN_TO_VARIANT["romanizedshort"] = FieldVariant.ROMANIZED_SHORT

_TOKEN_TO_FIELD: dict[str, CneFieldName] = {name.value: name for name in CneFieldName}

# (name part attribute) <-> wire token, in serialization order.
_NAME_PART_TOKENS: dict[str, str] = {
    "last_romanized": "last-romanized",
    "first_romanized": "first-romanized",
    "last_original": "last-original",
    "first_original": "first-original",
}
_OPTION_TOKENS: dict[str, str] = {
    "original_spacing": "original-spacing",
    "force_comma": "force-comma",
}

_TRUE_VALUES = frozenset({"true", "1", "yes"})

_LINE_RE = re.compile(r"^\s*(?P<key>[^\s:=]+)\s*[:=]\s*(?P<value>.*?)\s*$")

_FIELD_REST_RE = re.compile(
    r"^(?P<field>{fields})-(?P<variant>{variants})$".format(
        fields="|".join(re.escape(token) for token in _TOKEN_TO_FIELD),
        variants="|".join(re.escape(token) for token in _TOKEN_TO_VARIANT),
    )
)
# An index longer than nine digits leaves the line opaque.
_CREATOR_NAME_REST_RE = re.compile(
    r"^creator-(?P<index>\d{1,9})-(?P<part>(?:last|first)-(?:romanized|original))$"
)
_CREATOR_OPTION_REST_RE = re.compile(
    r"^creator-(?P<index>\d{1,9})-options-(?P<option>original-spacing|force-comma)$"
)


@dataclass(frozen=True)
class _Recognized:
    """One classified grammar line.

    ``kind`` is "language", "field", "name", or "option"; ``target`` is the
    field/variant pair or the author attribute name.
    """

    kind: str
    value: str
    target: tuple[CneFieldName, FieldVariant] | str | None = None
    index: int | None = None


@lru_cache(maxsize=16)
def _key_pattern(namespace: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(namespace.lower())}[-.](?P<rest>[a-z0-9-]+)$")


def _classify(line: str, namespace: str) -> _Recognized | None:
    """Classify a line, or return None when it is opaque."""
    line_match = _LINE_RE.match(line)
    if not line_match:
        return None

    key_match = _key_pattern(namespace).match(line_match.group("key").lower())
    if not key_match:
        return None

    value = normalize_value(line_match.group("value"))
    if value is None:
        return None

    rest = key_match.group("rest")

    if rest == ORIGINAL_LANGUAGE_KEY:
        return _Recognized(kind="language", value=value)

    m = _FIELD_REST_RE.match(rest)
    if m:
        target = (_TOKEN_TO_FIELD[m.group("field")], _TOKEN_TO_VARIANT[m.group("variant")])
        return _Recognized(kind="field", value=value, target=target)

    m = _CREATOR_NAME_REST_RE.match(rest)
    if m:
        attr = m.group("part").replace("-", "_")
        return _Recognized(kind="name", value=value, target=attr, index=int(m.group("index")))

    m = _CREATOR_OPTION_REST_RE.match(rest)
    if m:
        attr = m.group("option").replace("-", "_")
        return _Recognized(kind="option", value=value, target=attr, index=int(m.group("index")))

    return None


def _split_lines(text: str | None) -> tuple[list[str], bool]:
    """Split text into lines, reporting whether it ended with a newline."""
    if not text:
        return [], False
    lines = text.split("\n")
    trailing = lines[-1] == ""
    if trailing:
        lines.pop()
    return lines, trailing


def parse(text: str | None, namespace: str = DEFAULT_NAMESPACE) -> MetadataObject:
    """Parse the extra field into a MetadataObject.

    Never raises: unrecognized or malformed lines are skipped, so the worst
    case is an empty object. When a key appears more than once the last line
    wins.
    """
    data = MetadataObject()
    lines, _ = _split_lines(text)

    for line in lines:
        item = _classify(line, namespace)
        if item is None:
            continue
        if item.kind == "language":
            data.set_language(item.value)
        elif item.kind == "field":
            name, variant = item.target  # type: ignore[misc]
            data.set_variant(name, variant, item.value)
        elif item.kind == "name":
            data.set_author_value(item.index, item.target, item.value)  # type: ignore[arg-type]
        else:
            enabled = item.value.lower() in _TRUE_VALUES
            data.set_author_value(item.index, item.target, enabled)  # type: ignore[arg-type]

    return data


def render_lines(data: MetadataObject, namespace: str = DEFAULT_NAMESPACE) -> list[str]:
    """Render the recognized-line block for data in canonical order.

    Order: language line, then fields in CneFieldName order with variants in
    FieldVariant order, then authors by ascending index with name parts
    before options.
    """
    ns = namespace.lower()
    lines: list[str] = []

    language = normalize_value(data.original_language)
    if language:
        lines.append(f"{ns}-{ORIGINAL_LANGUAGE_KEY}: {language}")

    for name in CneFieldName:
        variants = data.fields.get(name)
        if not variants:
            continue
        for variant, raw in variants.items():
            value = normalize_value(raw)
            if value:
                lines.append(f"{ns}-{name.value}-{VARIANT_TOKENS[variant]}: {value}")

    for index in sorted(data.authors):
        entry = data.authors[index]
        for attr in AUTHOR_NAME_PARTS:
            value = normalize_value(getattr(entry, attr))
            if value:
                lines.append(f"{ns}-creator-{index}-{_NAME_PART_TOKENS[attr]}: {value}")
        for attr, token in _OPTION_TOKENS.items():
            option = getattr(entry, attr)
            if option is not None:
                flag = "true" if option else "false"
                lines.append(f"{ns}-creator-{index}-options-{token}: {flag}")

    return lines


def serialize(
    original_text: str | None,
    data: MetadataObject,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """Rewrite the extra field with the current metadata.

    Opaque lines are copied verbatim in their original relative order,
    blank lines included. Recognized lines from the old text are dropped and
    the block regenerated from data is appended after the opaque lines. A
    trailing newline in the original text is kept.
    """
    lines, trailing = _split_lines(original_text)
    preserved = [line for line in lines if _classify(line, namespace) is None]
    output = preserved + render_lines(data, namespace)

    text = "\n".join(output)
    if trailing and output:
        text += "\n"
    return text


def has_cne_metadata(text: str | None, namespace: str = DEFAULT_NAMESPACE) -> bool:
    """Whether the text carries at least one recognized line."""
    lines, _ = _split_lines(text)
    return any(_classify(line, namespace) is not None for line in lines)


def strip_cne_metadata(text: str | None, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Remove every recognized line, keeping opaque content as-is."""
    return serialize(text, MetadataObject(), namespace)
