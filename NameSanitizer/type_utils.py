"""Type utilities: map schema (XSD) type names to PHP types and type hints."""
from types import MappingProxyType
from typing import Optional

from . import naming_config
from .log import RenameLog
from .naming_utils import is_keyword, report_rename, validate_naming_convention

ARRAY_SUFFIX = "[]"
ARRAY_TYPE_HINT = "array"
DATETIME_TYPE = "\\DateTime"

_INT_TYPES = (
    "int", "integer", "long", "byte", "short",
    "negativeinteger", "nonnegativeinteger", "nonpositiveinteger", "positiveinteger",
    "unsignedbyte", "unsignedint", "unsignedlong", "unsignedshort",
)
_FLOAT_TYPES = ("float", "double", "decimal")
_STRING_TYPES = ("<anyxml>", "string", "token", "normalizedstring", "hexbinary")

# 小写 schema 类型名 -> PHP 类型
TYPE_MAPPING = MappingProxyType({
    **dict.fromkeys(_INT_TYPES, "int"),
    **dict.fromkeys(_FLOAT_TYPES, "float"),
    **dict.fromkeys(_STRING_TYPES, "string"),
    "datetime": DATETIME_TYPE,
})


def validate_type(type_name: str, renames: Optional[RenameLog] = None) -> str:
    """Validate a schema type against known PHP types.

    - ``Foo[]`` -> element name normalized, array marker kept (``Foo[]``)
    - primitive schema types (case-insensitive) -> PHP builtin
    - anything else -> normalized name, suffixed when it is a PHP keyword
    """
    if not isinstance(type_name, str):
        type_name = str(type_name)

    if type_name.endswith(ARRAY_SUFFIX):
        return validate_naming_convention(type_name[:-len(ARRAY_SUFFIX)]) + ARRAY_SUFFIX

    mapped = TYPE_MAPPING.get(type_name.lower())
    if mapped is not None:
        return mapped

    validated = validate_naming_convention(type_name)
    if is_keyword(validated):
        renamed = validated + naming_config.NAME_SUFFIX
        report_rename("类型", type_name, renamed, renames)
        return renamed
    return validated


def validate_type_hint(type_name: str) -> Optional[str]:
    """Return the parameter type hint for a type, or None if it cannot have one.

    Only arrays and DateTime get a hint. Generated classes could too, but enums
    are rendered as plain strings and cannot be told apart from classes here.
    Accepts the raw schema name as well as the result of validate_type.
    """
    if not isinstance(type_name, str):
        return None
    if type_name.endswith(ARRAY_SUFFIX):
        return ARRAY_TYPE_HINT
    if type_name == DATETIME_TYPE or TYPE_MAPPING.get(type_name.lower()) == DATETIME_TYPE:
        return DATETIME_TYPE
    return None
