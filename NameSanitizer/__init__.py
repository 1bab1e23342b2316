"""PHP identifier sanitizing for names taken from WSDL/XSD schemas."""
from .exceptions import EmptyIdentifierError, NameValidationError
from .log import RenameLog
from .naming_utils import (
    PHP_KEYWORDS,
    is_keyword,
    is_valid_php_identifier,
    strip_invisible,
    validate_naming_convention,
)
from .transliteration import remove_accents
from .type_utils import validate_type, validate_type_hint
from .validator import (
    DeclaredNames,
    NameCategory,
    validate_attribute,
    validate_class,
    validate_constant,
    validate_name,
    validate_operation,
    validate_unique,
)
