"""
Logging package - Universal dashboard logger.

Usage:
    from tournament_leaderboard.logging import get_logger

    logger = get_logger()
    logger.info("Loading leaderboard...")
    logger.success("Completed!")
"""

from tournament_leaderboard.logging.logger import get_logger, DashboardLogger

__all__ = [
    "get_logger",
    "DashboardLogger",
]
