"""Loading theme rule catalogs from JSON or YAML files."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

import yaml
from pydantic import ValidationError

from .errors import CatalogError
from .rules import ThemeRulesConfig

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "theme_rules.json"


def parse_catalog(data: Dict[str, Any]) -> ThemeRulesConfig:
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be a mapping of categories, got {type(data).__name__}")
    try:
        return ThemeRulesConfig.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid theme catalog: {e}") from e


def load_catalog(path: Union[str, Path]) -> ThemeRulesConfig:
    """Load and validate a catalog file (``.json``, ``.yaml`` or ``.yml``)."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    if path.suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {path}: {e}") from e
    elif path.suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in {path}: {e}") from e
    else:
        raise CatalogError(f"Unsupported catalog format: {path.suffix or path.name}")

    catalog = parse_catalog(data)
    logger.info("Loaded %d themes from %s", catalog.theme_count(), path)
    return catalog


@lru_cache(maxsize=1)
def load_default_catalog() -> ThemeRulesConfig:
    """The catalog bundled with the package, loaded once per process."""
    return load_catalog(DEFAULT_CATALOG_PATH)
