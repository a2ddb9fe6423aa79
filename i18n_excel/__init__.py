"""Convert between i18n spreadsheets and flat JSON key/content mappings."""

from .errors import ConversionError, DuplicateKeysError, InputNotFoundError, JsonParseError, SpreadsheetFormatError
from .services.conversion import generate, parse
from .services.duplicates import find_duplicate_keys, find_unique_items
from .services.validation import validate_json_file, validate_unique_keys

__all__ = [
    "parse",
    "generate",
    "validate_unique_keys",
    "validate_json_file",
    "find_duplicate_keys",
    "find_unique_items",
    "ConversionError",
    "DuplicateKeysError",
    "InputNotFoundError",
    "JsonParseError",
    "SpreadsheetFormatError",
]

__version__ = "0.1.0"
