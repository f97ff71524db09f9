"""Streaming technical analysis: exponential moving averages, cross detection, candle transforms and indicators such as MACD, RSI, MFI, Klinger and Parabolic SAR."""

__version__ = "0.7.0"

__all__ = [
    "adi",
    "averages",
    "core",
    "cross",
    "klinger",
    "macd",
    "money_flow_index",
    "parabolic_sar",
    "rsi",
    "transform",
    "windowed",
]