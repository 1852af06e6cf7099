from translatica.defaults import (
    get_formatted_message,
    get_message,
    get_registry,
    get_section,
    reset_registry,
)
from translatica.exceptions import (
    InvalidKey,
    InvalidLocale,
    MessageFormatError,
    MessageNotFound,
    TranslaticaError,
)
from translatica.formatting import MessageArgument, format_indexed, format_printf
from translatica.locale import Locale, current_locale, fixed_locale
from translatica.registry import MessageRegistry
from translatica.section import MessageSection
from translatica.sources import MappingMessageSource, MessageSource, discover_sources, load_json_source

__all__ = [
    "InvalidKey",
    "InvalidLocale",
    "Locale",
    "MappingMessageSource",
    "MessageArgument",
    "MessageFormatError",
    "MessageNotFound",
    "MessageRegistry",
    "MessageSection",
    "MessageSource",
    "TranslaticaError",
    "current_locale",
    "discover_sources",
    "fixed_locale",
    "format_indexed",
    "format_printf",
    "get_formatted_message",
    "get_message",
    "get_registry",
    "get_section",
    "load_json_source",
    "reset_registry",
]
