"""
Core package for the Tournament Leaderboard dashboard.

Provides everything the dashboard needs apart from drawing pixels:
- Decoding tournament results (CSV) and player configs (YAML)
- View state, pinning and comparison selection
- Filtering, sorting and highlighting of leaderboard rows
- Chart datasets and CSV/JSON export

The Streamlit UI (streamlit_app/) is a thin adapter over this package.
"""

__version__ = "0.1.0"
