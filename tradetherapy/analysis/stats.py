"""Summary statistics over the trade journal."""

from tradetherapy.models import Stats, Trade


def calculate_stats(trades: list[Trade]) -> Stats:
    """Calculate summary metrics from a list of trades.

    Args:
        trades: List of Trade objects.

    Returns:
        Stats with win rate rounded to 1 decimal and profit figures
        rounded to 2 decimals. An empty journal yields all zeros.
    """
    if not trades:
        return Stats()

    total_trades = len(trades)
    wins = sum(1 for trade in trades if trade.is_win)
    total_pnl = sum(trade.profit or 0.0 for trade in trades)
    avg_profit = total_pnl / total_trades

    return Stats(
        total_trades=total_trades,
        win_rate=round(wins / total_trades * 100, 1),
        avg_profit=round(avg_profit, 2),
        total_pnl=round(total_pnl, 2),
    )
