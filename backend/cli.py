"""CLI tool for inspecting a wallet's analytics without the web server.

Usage:
    python -m backend.cli summary <address> [symbol]
    python -m backend.cli export-csv <address> [symbol]
"""

import sys

from backend.services.csv_export import export_trades_csv
from backend.services.solana import WalletDataError
from backend.services.wallet_data import fetch_trade_history, fetch_trades
from backend.utils.logging import setup_logging


def summary(address: str, symbol: str | None = None):
    """Print headline metrics and insights for a wallet."""
    bundle = fetch_trades(address, symbol)
    m = bundle.metrics

    print(f"Wallet:        {address}")
    if symbol:
        print(f"Symbol filter: {symbol}")
    print(f"Trades:        {m.total_trades}")
    print(f"Total PnL:     ${m.total_pnl:,.2f} ({m.total_pnl_percent:.2f}% of volume)")
    print(f"Win rate:      {m.win_rate:.1f}%")
    print(f"Volume:        ${m.total_volume:,.2f}")
    print(f"Fees:          ${m.total_fees:,.2f}")
    print(f"Avg win/loss:  ${m.avg_win:,.2f} / ${m.avg_loss:,.2f}")
    print(f"Profit factor: {m.profit_factor:.2f}")
    print(f"Max drawdown:  {bundle.risk_summary.max_drawdown:.2f}%")

    if bundle.insights:
        print("\nInsights:")
        for insight in bundle.insights:
            print(f"  - {insight}")


def export_csv(address: str, symbol: str | None = None):
    """Write the wallet's trade journal as CSV to stdout."""
    trades = fetch_trade_history(address, symbol)
    sys.stdout.write(export_trades_csv(trades) + "\n")


COMMANDS = {
    "summary": summary,
    "export-csv": export_csv,
}


def main():
    if len(sys.argv) < 3 or sys.argv[1] not in COMMANDS:
        print("Usage: python -m backend.cli <command> <address> [symbol]")
        print(f"Commands: {', '.join(COMMANDS)}")
        sys.exit(1)

    setup_logging("WARNING")
    command = COMMANDS[sys.argv[1]]
    address = sys.argv[2]
    symbol = sys.argv[3] if len(sys.argv) > 3 else None

    try:
        command(address, symbol)
    except WalletDataError as e:
        print(f"Error: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
