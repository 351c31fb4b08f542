"""
Streamlit Dashboard Application.

Interactive UI over the tournament_leaderboard package:
- Leaderboard table with search, filters, sorting and highlights
- Charts of win rates, ratings and game results
- Player details, comparison and export

The UI holds no logic of its own; everything goes through the
DashboardController.
"""

__version__ = "0.1.0"
