"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from epp.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from epp.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def transaction_repository(
    data_dir: Path = DEFAULT_DATA_DIR,
) -> JsonTransactionRepository:
    return JsonTransactionRepository(data_dir / "transactions.json")
