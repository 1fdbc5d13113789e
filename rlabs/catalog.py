"""Lab catalog loading.

The card content is static data: an introduction plus an ordered list of
labs, loaded once from JSON and never mutated. A card's position in the list
is its item identifier for the session.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rlabs.exceptions import CatalogError

# Module-level logger
logger = logging.getLogger(__name__)


class Intro(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    content: str


class Lab(BaseModel):
    """One instructional card."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    example: str
    output: str
    interpretation: str
    exercise: str


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    intro: Intro
    labs: List[Lab]

    def lab(self, item_id: int) -> Lab:
        """Return the card at ``item_id``.

        Raises:
            CatalogError: If no card has that index
        """
        if not 0 <= item_id < len(self.labs):
            raise CatalogError(f"No lab with index {item_id} (catalog has {len(self.labs)})")
        return self.labs[item_id]

    def __len__(self) -> int:
        return len(self.labs)


def _read_default() -> str:
    return (resources.files("rlabs") / "data" / "labs.json").read_text(encoding="utf-8")


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load and validate a lab catalog.

    Args:
        path: JSON file to load; the bundled catalog when None

    Returns:
        The validated catalog

    Raises:
        CatalogError: If the file cannot be read, parsed or validated
    """
    source = str(path) if path is not None else "bundled catalog"

    try:
        raw = Path(path).read_text(encoding="utf-8") if path is not None else _read_default()
    except OSError as e:
        raise CatalogError(f"Cannot read {source}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {source}: {e}") from e

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog in {source}: {e}") from e

    logger.info(f"Loaded {len(catalog.labs)} labs from {source}")
    return catalog
