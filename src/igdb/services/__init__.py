"""Services for talking to the IGDB API."""

from .client import Client
from .config import ConfigurationService, ValidationResult
from .endpoints import Endpoint
from .entity import EntityService, SearchableService
from .errors import (
    APIError,
    BlankImageIDError,
    ConfigurationError,
    EmptyFieldError,
    EmptyFilterValueError,
    EmptyIDsError,
    EmptyQueryError,
    ErrorCategory,
    ErrorContext,
    IGDBError,
    MalformedResponseError,
    MissingFieldsError,
    NegativeIDError,
    NetworkError,
    NoResultsError,
    OutOfRangeError,
    PixelRatioError,
    TooManyArgsError,
    ValidationError,
)
from .http_client import HttpClientService
from .images import sized_image_url
from .logging import LoggingService, setup_logging
from .options import (
    Operator,
    Option,
    Options,
    Order,
    Subfilter,
    compose_options,
    encode_url,
    new_options,
    set_fields,
    set_filter,
    set_limit,
    set_offset,
    set_order,
    set_scroll,
)
from .tags import TagType, generate_tag
from .validation import missing_model_fields, validate_model_fields

__all__ = [
    "APIError",
    "BlankImageIDError",
    "Client",
    "ConfigurationError",
    "ConfigurationService",
    "EmptyFieldError",
    "EmptyFilterValueError",
    "EmptyIDsError",
    "EmptyQueryError",
    "Endpoint",
    "EntityService",
    "ErrorCategory",
    "ErrorContext",
    "HttpClientService",
    "IGDBError",
    "LoggingService",
    "MalformedResponseError",
    "MissingFieldsError",
    "NegativeIDError",
    "NetworkError",
    "NoResultsError",
    "Operator",
    "Option",
    "Options",
    "Order",
    "OutOfRangeError",
    "PixelRatioError",
    "SearchableService",
    "Subfilter",
    "TagType",
    "TooManyArgsError",
    "ValidationError",
    "ValidationResult",
    "compose_options",
    "encode_url",
    "generate_tag",
    "missing_model_fields",
    "new_options",
    "set_fields",
    "set_filter",
    "set_limit",
    "set_offset",
    "set_order",
    "set_scroll",
    "setup_logging",
    "sized_image_url",
    "validate_model_fields",
]
