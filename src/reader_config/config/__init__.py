"""Configuration module for the reader."""

from .schema import (
    ColorPair,
    ThemeColors,
    FeatureFlags,
    LocalizedStrings,
    StoreConfiguration,
    QuoteImage,
    ReaderConfiguration,
    Translate,
    UNTRANSLATED_STRINGS,
)
from .loader import default_configuration, load_config, save_config, parse_config

__all__ = [
    'ColorPair',
    'ThemeColors',
    'FeatureFlags',
    'LocalizedStrings',
    'StoreConfiguration',
    'QuoteImage',
    'ReaderConfiguration',
    'Translate',
    'UNTRANSLATED_STRINGS',
    'default_configuration',
    'load_config',
    'save_config',
    'parse_config',
]
