"""Flat CSV export of a trade list for the journal's download action."""

import csv
import io
from collections.abc import Sequence
from datetime import datetime, timezone

from backend.schemas.trade import Trade

CSV_HEADERS = (
    "ID", "Symbol", "Market Type", "Order Type", "Direction", "Entry Price", "Exit Price",
    "Size", "Leverage", "PnL", "PnL %", "Fees", "Entry Time", "Exit Time", "Duration (min)",
    "Session", "Strategy", "Notes", "Tx Hash",
)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def trade_row(trade: Trade) -> list[str]:
    return [
        trade.id,
        trade.symbol,
        trade.market_type,
        trade.order_type,
        trade.direction,
        f"{trade.entry_price:.6f}",
        f"{trade.exit_price:.6f}",
        _format_number(trade.size),
        str(trade.leverage),
        f"{trade.pnl:.2f}",
        f"{trade.pnl_percent:.2f}",
        f"{trade.fees:.4f}",
        format_timestamp(trade.entry_time),
        format_timestamp(trade.exit_time),
        str(trade.duration),
        trade.session,
        trade.strategy or "",
        trade.notes or "",
        trade.tx_hash,
    ]


def export_trades_csv(trades: Sequence[Trade], *, quoted: bool = False) -> str:
    """Header plus one line per trade, lines joined by ``\\n``.

    By default fields are joined with bare commas and nothing is escaped,
    so a note containing a comma shifts the following columns. Pass
    ``quoted=True`` to write through :mod:`csv` with minimal quoting.
    """
    if not quoted:
        lines = [",".join(CSV_HEADERS)]
        lines.extend(",".join(trade_row(t)) for t in trades)
        return "\n".join(lines)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(trade_row(t) for t in trades)
    return buffer.getvalue().rstrip("\n")
