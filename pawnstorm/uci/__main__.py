"""
Main entry point for running Pawnstorm's text protocol driver.

Usage:
    python -m pawnstorm.uci
"""

from pawnstorm.uci.interface import UCIEngine

if __name__ == "__main__":
    engine = UCIEngine()
    engine.run()
