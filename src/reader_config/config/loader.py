"""
Configuration Loader for the Reader

Builds reader configurations from defaults, plain mappings, or YAML/JSON
files, and writes them back out.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from .schema import (
    FeatureFlags,
    LocalizedStrings,
    ReaderConfiguration,
    Translate,
)

logger = logging.getLogger(__name__)

_FLAG_NAMES = frozenset(FeatureFlags.model_fields)


def default_configuration(identifier: Optional[str] = None,
                          translate: Optional[Translate] = None) -> ReaderConfiguration:
    """Create a fresh reader configuration with default values.

    Every call returns a new instance, so concurrent reader sessions never
    share state.

    Args:
        identifier: Optional reader instance identifier
        translate: Localization lookup applied once to each display string

    Returns:
        ReaderConfiguration instance
    """
    return ReaderConfiguration(
        identifier=identifier,
        strings=LocalizedStrings.resolve(translate),
    )


def load_config(config_path: Union[str, Path],
                translate: Optional[Translate] = None) -> ReaderConfiguration:
    """Load reader configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)
        translate: Localization lookup for the default display strings

    Returns:
        ReaderConfiguration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config format is unsupported or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    logger.debug("Loaded reader configuration from %s", config_path)
    return parse_config(data or {}, translate=translate)


def parse_config(data: dict, translate: Optional[Translate] = None) -> ReaderConfiguration:
    """Parse configuration data into ReaderConfiguration model.

    Strings given in the data are used verbatim; only the defaults they
    replace go through the translator.

    Args:
        data: Raw configuration dictionary
        translate: Localization lookup for the default display strings

    Returns:
        ReaderConfiguration instance
    """
    data = dict(data)

    if not isinstance(data.get('strings'), LocalizedStrings):
        strings = LocalizedStrings.resolve(translate).model_dump()
        strings.update(data.get('strings') or {})
        data['strings'] = strings

    # Older files keep the flags at the top level
    if 'features' not in data:
        flags = {key: data.pop(key) for key in list(data) if key in _FLAG_NAMES}
        if flags:
            data['features'] = flags

    return ReaderConfiguration(**data)


def save_config(config: ReaderConfiguration, output_path: Union[str, Path]) -> None:
    """Save reader configuration to YAML or JSON file.

    Click listeners hold callbacks and are never written.

    Args:
        config: ReaderConfiguration instance to save
        output_path: Path for output file
    """
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()

    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")

    data = config.model_dump(mode='json', exclude_none=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    logger.debug("Saved reader configuration to %s", output_path)
