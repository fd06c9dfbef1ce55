"""Persistence for Post-Trade Therapy."""

from tradetherapy.db.codec import dump_trades, parse_trades
from tradetherapy.db.store import DataStore

__all__ = ["DataStore", "dump_trades", "parse_trades"]
