"""Scenario selection engine for the IntradayGraf backtest simulator.

Loads backtested scenarios from the hosted scenario store, picks the best
one by serenity (risk-adjusted ratio) or performance (raw gain), and
formats the result for display.
"""

__version__ = "0.1.0"
