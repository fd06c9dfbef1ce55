"""JSON encoding of the trade journal.

The same format is used for the stored journal and for export files:
a JSON array of trade objects with camelCase keys, compatible with
journals exported from the original web app.
"""

import json
import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from tradetherapy.models import Trade

logger = logging.getLogger(__name__)

_TRADE_LIST = TypeAdapter(list[Trade])


def dump_trades(trades: list[Trade], indent: Optional[int] = None) -> str:
    """Serialize trades to a JSON array.

    Args:
        trades: Trades in journal order.
        indent: Optional indentation for human-readable output.

    Returns:
        JSON text.
    """
    payload = [
        trade.model_dump(mode="json", by_alias=True, exclude_none=True)
        for trade in trades
    ]
    return json.dumps(payload, indent=indent)


def parse_trades(text: str) -> Optional[list[Trade]]:
    """Parse a JSON array of trades.

    Args:
        text: JSON text.

    Returns:
        Parsed trades, or None if the text is not a valid trade array.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning("Journal payload is not valid JSON: %s", e)
        return None

    if not isinstance(data, list):
        logger.warning("Journal payload is not a JSON array (got %s)", type(data).__name__)
        return None

    try:
        return _TRADE_LIST.validate_python(data)
    except ValidationError as e:
        logger.warning("Journal payload contains invalid trades: %s", e.error_count())
        return None
