from typstyle.core.extractor import extract_styles
from typstyle.core.parser.style_models import StyleRecord
from typstyle.core.exceptions import (
    TypStyleError, OpenError, OOXMLError, EntryNotFoundError, ReadError, ParseError
)

__all__ = [
    "extract_styles",
    "StyleRecord",
    "TypStyleError",
    "OpenError",
    "OOXMLError",
    "EntryNotFoundError",
    "ReadError",
    "ParseError",
]
