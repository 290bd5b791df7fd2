"""Loading the product dataset produced by the upstream pipeline."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import DATA_FILE
from .models import Product
from .utils import load_json

logger = logging.getLogger(__name__)


class ProductRepository:
    """Read product records from the JSON dataset."""

    def __init__(self, data_file: Path | None = None) -> None:
        self.data_file = Path(data_file) if data_file else DATA_FILE

    def _load_records(self) -> list:
        data = load_json(self.data_file)
        if isinstance(data, dict):
            if isinstance(data.get("products"), list):
                return data["products"]
            records = []
            for key, record in data.items():
                if not isinstance(record, dict):
                    raise ValueError(f"Product record {key!r} must be an object: {record!r}")
                records.append({"id": key, **record})
            return records
        if isinstance(data, list):
            return data
        raise ValueError(f"Unsupported dataset layout in {self.data_file}")

    def load_products(self) -> List[Product]:
        products = [Product.from_dict(raw) for raw in self._load_records()]
        logger.debug("Loaded %s products from %s", len(products), self.data_file)
        return products
