"""
icpcboard: ICPC contest scoreboard simulation

This package ingests a stream of contest events (team registration,
submissions, freeze, scroll, queries), maintains the ranking of teams and
reproduces the frozen-board reveal one ranking change at a time.
"""

__version__ = "0.1.0"
