"""Kameleoon OpenFeature provider library."""

from .casting import CastResult, caster_for, to_bool, to_float, to_int, to_object, to_str
from .client import KameleoonClientProtocol
from .config import KameleoonClientConfig, LogSection, ProviderConfig, load_config
from .converter import to_kameleoon, to_openfeature
from .data import Conversion, CustomData, KameleoonData
from .exceptions import (
    ConfigError,
    FeatureEnvironmentDisabled,
    FeatureError,
    FeatureNotFound,
    FeatureVariationNotFound,
    KameleoonError,
    ProviderError,
    ProviderErrorCodes,
    SiteCodeIsEmpty,
    VisitorCodeInvalid,
)
from .logger import new_logger
from .memory import InMemoryKameleoonClient
from .models import ErrorType, ProviderMetadata, ProviderStatus, ResolutionDetails
from .provider import KameleoonProvider
from .registry import KameleoonClientRegistry
from .resolver import Resolver
from .types import VARIABLE_KEY, ConversionType, CustomDataType, DataType
from .value import EvaluationContext, EvaluationContextBuilder, Structure, Value, ValueType

__all__ = [
    "CastResult",
    "ConfigError",
    "Conversion",
    "ConversionType",
    "CustomData",
    "CustomDataType",
    "DataType",
    "ErrorType",
    "EvaluationContext",
    "EvaluationContextBuilder",
    "FeatureEnvironmentDisabled",
    "FeatureError",
    "FeatureNotFound",
    "FeatureVariationNotFound",
    "InMemoryKameleoonClient",
    "KameleoonClientConfig",
    "KameleoonClientProtocol",
    "KameleoonClientRegistry",
    "KameleoonData",
    "KameleoonError",
    "KameleoonProvider",
    "LogSection",
    "ProviderConfig",
    "ProviderError",
    "ProviderErrorCodes",
    "ProviderMetadata",
    "ProviderStatus",
    "ResolutionDetails",
    "Resolver",
    "SiteCodeIsEmpty",
    "Structure",
    "VARIABLE_KEY",
    "Value",
    "ValueType",
    "VisitorCodeInvalid",
    "caster_for",
    "load_config",
    "new_logger",
    "to_bool",
    "to_float",
    "to_int",
    "to_kameleoon",
    "to_object",
    "to_openfeature",
    "to_str",
]
