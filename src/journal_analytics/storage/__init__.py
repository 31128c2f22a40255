from .loader import load_trades, parse_trades

__all__ = ["load_trades", "parse_trades"]
