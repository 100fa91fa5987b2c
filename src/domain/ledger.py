"""Line-Item Ledger

Owns the products added to an invoice and the running net/gross sums.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional
from src.domain.line_item import LineItem, Number, to_decimal

logger = logging.getLogger(__name__)


class LineItemLedger:
    """
    Ledger of line items for one invoice

    Domain Rules:
    - net_sum/gross_sum accumulate every addition, before de-duplication
    - finalize() collapses additions with the same identity key into one row
      whose quantity is the number of additions, in first-seen order
    - finalize() is idempotent; rows are always derived from the raw additions
    """

    def __init__(self):
        self._entries: List[LineItem] = []
        self._rows: Optional[List[LineItem]] = None
        self.net_sum = Decimal("0")
        self.gross_sum = Decimal("0")

    def add(
        self,
        description: str,
        net_price: Number,
        tax_rate: Number,
        gross_price: Number,
    ) -> LineItem:
        """
        Append a raw entry and update the running sums

        No range validation is done, negative prices are accepted as-is.
        """
        item = LineItem(
            description=description,
            net_price=to_decimal(net_price),
            tax_rate=to_decimal(tax_rate),
            gross_price=to_decimal(gross_price),
        )
        self._entries.append(item)
        self._rows = None

        self.net_sum += item.net_price
        self.gross_sum += item.gross_price
        return item

    def finalize(self) -> List[LineItem]:
        """Collapse entries by identity key and tag each row with its quantity"""
        counts: Dict[str, int] = {}
        first_seen: Dict[str, LineItem] = {}
        for entry in self._entries:
            key = entry.identity_key
            counts[key] = counts.get(key, 0) + 1
            first_seen.setdefault(key, entry)

        self._rows = [
            item.model_copy(update={"quantity": counts[key]})
            for key, item in first_seen.items()
        ]
        logger.debug(
            f"Finalized ledger: {len(self._entries)} additions -> {len(self._rows)} rows"
        )
        return list(self._rows)

    @property
    def rows(self) -> List[LineItem]:
        """Finalized rows, or the raw entries if finalize() has not run yet"""
        if self._rows is None:
            return list(self._entries)
        return list(self._rows)

    @property
    def has_taxed_items(self) -> bool:
        """True once any addition has tax_rate > 0, entries are never removed"""
        return any(entry.is_taxed for entry in self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
