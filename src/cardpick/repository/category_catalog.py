import json
import logging
from pathlib import Path

from cardpick.domain.catalog import MappingCategoryCatalog
from cardpick.domain.models import CategoryInfo

logger = logging.getLogger(__name__)


class JsonCategoryCatalog(MappingCategoryCatalog):
    """Category catalog read from a JSON object of ``code -> {category, description}``."""

    def __init__(self, catalog_file: str):
        self.catalog_file = Path(catalog_file)
        if not self.catalog_file.exists():
            raise FileNotFoundError(f"Category catalog not found: {self.catalog_file}")

        with self.catalog_file.open("r", encoding="utf-8") as fh:
            data = json.load(fh)

        super().__init__({str(code): CategoryInfo.model_validate(entry) for code, entry in data.items()})
        logger.info("Loaded %d category code(s) from %s", len(self), self.catalog_file)
