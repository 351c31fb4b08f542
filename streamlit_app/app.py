"""
Streamlit Dashboard for the Tournament Leaderboard.

Shows the final standings of a tournament:
- Summary statistics
- Filterable, sortable leaderboard with pinning and highlights
- Win rate, rating and game result charts
- Player details and two-player comparison
- CSV / JSON export of the filtered table

All state lives in a DashboardController kept in st.session_state;
this file only maps widgets to controller actions and paints the result.

Run from project root:
    streamlit run streamlit_app/app.py
"""

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

from config.dashboard_config import DashboardConfig
from tournament_leaderboard.controller import DashboardController
from tournament_leaderboard.enums import (
    GamesFilter,
    Highlight,
    SortKey,
    Theme,
    WinRateFilter,
    WinRateTier,
)
from tournament_leaderboard.errors import FatalLoadError
from tournament_leaderboard.services import charts, export
from tournament_leaderboard.services.engine import format_rating, format_win_rate

# Row background per highlight class
HIGHLIGHT_COLORS = {
    Theme.LIGHT: {
        Highlight.PINNED: "background-color: #fff3cd",
        Highlight.HIGH_WIN_RATE: "background-color: #d4edda",
        Highlight.TOP3: "background-color: #e8f4fd",
        Highlight.NONE: "",
    },
    Theme.DARK: {
        Highlight.PINNED: "background-color: #4a3f1c",
        Highlight.HIGH_WIN_RATE: "background-color: #1e4620",
        Highlight.TOP3: "background-color: #1c3a52",
        Highlight.NONE: "",
    },
}

TIER_COLORS = {
    WinRateTier.HIGH: "color: #27ae60; font-weight: bold",
    WinRateTier.MEDIUM: "color: #f39c12; font-weight: bold",
    WinRateTier.LOW: "color: #e74c3c; font-weight: bold",
}

DARK_CSS = """
<style>
.stApp { background-color: #1a1a2e; color: #eaeaea; }
[data-testid="stSidebar"] { background-color: #16213e; }
h1, h2, h3, h4, p, label, span { color: #eaeaea !important; }
</style>
"""

WIN_RATE_OPTIONS = {
    "All Win Rates": WinRateFilter.ALL,
    "High (≥60%)": WinRateFilter.HIGH,
    "Medium (40-60%)": WinRateFilter.MEDIUM,
    "Low (<40%)": WinRateFilter.LOW,
}
GAMES_OPTIONS = {
    "All Games": GamesFilter.ALL,
    "Full (12 games)": GamesFilter.FULL,
    "Partial (<12 games)": GamesFilter.PARTIAL,
}
SORT_OPTIONS = {
    "Rank": SortKey.RANK,
    "Rating (μ)": SortKey.RATING,
    "Win Rate": SortKey.WIN_RATE,
    "Games Played": SortKey.GAMES,
}


def get_controller() -> DashboardController:
    """Create and load the session's controller on first use."""
    if "controller" not in st.session_state:
        config = DashboardConfig.from_file()
        controller = DashboardController.from_config(config)
        controller.load()
        st.session_state.controller = controller
    return st.session_state.controller


def show_figure(fig):
    st.pyplot(fig)
    plt.close(fig)


def show_player_stats(details, theme: Theme):
    """Stats block shared by the detail and comparison views."""
    r = details.record
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Rank", f"#{r.rank}")
    col2.metric("Rating (μ)", format_rating(r.rating_mu))
    col3.metric("Uncertainty (σ)", format_rating(r.rating_sigma))
    col4.metric("Win Rate", format_win_rate(r.win_rate))

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Games", r.games)
    col2.metric("Wins", r.wins)
    col3.metric("Draws", r.draws)
    col4.metric("Losses", r.losses)

    show_figure(charts.plot_result_breakdown(r, theme))


# Page config
config = DashboardConfig.from_file()
st.set_page_config(
    page_title=config.page_title,
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="expanded"
)

try:
    controller = get_controller()
except FatalLoadError as e:
    st.title(f"🏆 {config.page_title}")
    st.error(
        f"Error loading data: {e}\n\n"
        f"Please ensure the results file exists at {config.results_path}."
    )
    st.stop()

state = controller.state
theme = state.theme
if theme == Theme.DARK:
    st.markdown(DARK_CSS, unsafe_allow_html=True)

# Title
st.title(f"🏆 {config.page_title}")
st.markdown("*Final standings, ratings and agent configurations*")

# Sidebar
with st.sidebar:
    st.header("Controls")

    search = st.text_input("🔍 Search player", value=state.search_term)
    controller.set_search(search)

    win_rate_label = st.selectbox("Win Rate", list(WIN_RATE_OPTIONS))
    controller.set_win_rate_filter(WIN_RATE_OPTIONS[win_rate_label])

    games_label = st.selectbox("Games Played", list(GAMES_OPTIONS))
    controller.set_games_filter(GAMES_OPTIONS[games_label])

    sort_label = st.selectbox("Sort by", list(SORT_OPTIONS))
    controller.set_sort_key(SORT_OPTIONS[sort_label])

    st.markdown("---")
    st.subheader("Highlight")
    controller.set_highlight_top3(st.checkbox("Top 3 players", value=state.highlight_top3))
    controller.set_highlight_win_rate(st.checkbox("Win rate > 80%", value=state.highlight_win_rate))

    st.subheader("Display")
    controller.set_show_model_column(st.checkbox("Show model", value=state.show_model_column))
    controller.set_show_prompts_column(st.checkbox("Show prompts", value=state.show_prompts_column))

    st.markdown("---")
    theme_label = "☀️ Light Mode" if theme == Theme.DARK else "🌙 Dark Mode"
    if st.button(theme_label):
        controller.toggle_theme()
        st.rerun()

    st.markdown("---")
    st.caption("Tournament Leaderboard v0.1.0")

# Statistics
stats = controller.statistics()
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Total Players", stats.total_players)
with col2:
    st.metric("Total Games", stats.total_games)
with col3:
    st.metric("Avg Win Rate", f"{stats.avg_win_rate:.3f}")
with col4:
    st.metric("Top Rating", f"{stats.top_rating:.2f}")

st.markdown("---")

# Leaderboard
st.header("📊 Leaderboard")
rows = controller.render()

if not rows:
    st.info("No players match the current filters")
else:
    table = pd.DataFrame([row.to_display_dict() for row in rows])
    table.insert(0, "📌", ["📌" if row.is_pinned else "" for row in rows])
    table.insert(1, "Compare", ["✔" if row.is_selected else "" for row in rows])
    if not state.show_model_column:
        table = table.drop(columns=["Model"])
    if not state.show_prompts_column:
        table = table.drop(columns=["Prompts"])

    row_styles = [HIGHLIGHT_COLORS[theme][row.highlight] for row in rows]
    tier_styles = [TIER_COLORS[row.tier] for row in rows]

    styled = (
        table.style
        .apply(lambda _: [row_styles[i] for i in range(len(rows))], axis=0)
        .apply(lambda _: tier_styles, subset=["Win Rate"], axis=0)
    )
    st.dataframe(styled, hide_index=True, use_container_width=True)

visible_players = [row.player for row in rows]

# Pin and compare
col1, col2 = st.columns(2)
with col1:
    st.subheader("📌 Pin Player")
    if visible_players:
        pin_target = st.selectbox("Player", visible_players, key="pin_target")
        pin_label = "Unpin" if state.pinned_player == pin_target else "Pin"
        if st.button(pin_label):
            controller.toggle_pin(pin_target)
            st.rerun()
    if state.pinned_player:
        st.caption(f"Pinned: {state.pinned_player}")


def on_compare_change():
    controller.set_selection(st.session_state.compare_widget)
    st.session_state.compare_widget = controller.selection.selected


def on_select_top_change():
    controller.select_all(st.session_state.select_top_widget)
    st.session_state.compare_widget = controller.selection.selected


with col2:
    st.subheader("⚖️ Compare Players")
    if "compare_widget" not in st.session_state:
        st.session_state.compare_widget = controller.selection.selected
    st.multiselect(
        "Select two players (oldest selection is replaced)",
        controller.store.player_names,
        key="compare_widget",
        on_change=on_compare_change,
    )
    st.checkbox("Select first two visible", key="select_top_widget", on_change=on_select_top_change)

comparison = controller.comparison()
if comparison:
    st.markdown("---")
    st.header("⚖️ Player Comparison")
    left, right = st.columns(2)
    for column, details in zip((left, right), comparison):
        with column:
            st.subheader(details.record.player)
            show_player_stats(details, theme)
            st.markdown(f"**Agent 0:** {details.model_info['agent0']}")
            st.markdown(f"**Agent 1:** {details.model_info['agent1']}")

# Player details
st.markdown("---")
st.header("🔎 Player Details")
if visible_players:
    detail_player = st.selectbox("Select player", visible_players, key="detail_player")
    details = controller.player_details(detail_player)
    if details:
        show_player_stats(details, theme)
        if details.has_config:
            st.subheader("🤖 Models")
            st.markdown(f"**Agent 0:** {details.model_info['agent0']}")
            st.markdown(f"**Agent 1:** {details.model_info['agent1']}")

            st.subheader("📝 Prompts")
            with st.expander("Agent 0 - System Prompt"):
                st.text(details.prompts["agent0_system"])
            with st.expander("Agent 0 - Step-wise Prompt"):
                st.text(details.prompts["agent0_step"])
            with st.expander("Agent 1 - System Prompt"):
                st.text(details.prompts["agent1_system"])
            with st.expander("Agent 1 - Step-wise Prompt"):
                st.text(details.prompts["agent1_step"])

# Charts
st.markdown("---")
st.header("📈 Charts")
col1, col2 = st.columns(2)
with col1:
    show_figure(charts.plot_win_rate(controller.store.records, theme))
with col2:
    show_figure(charts.plot_rating_distribution(controller.store.records, theme))
show_figure(charts.plot_game_stats(controller.store.records, theme))

# Export
st.markdown("---")
st.header("📤 Export Data")
col1, col2 = st.columns(2)
with col1:
    st.download_button(
        "Export as CSV",
        data=controller.export_csv(),
        file_name=export.CSV_FILENAME,
        mime=export.CSV_MIME,
    )
with col2:
    st.download_button(
        "Export as JSON",
        data=controller.export_json(),
        file_name=export.JSON_FILENAME,
        mime=export.JSON_MIME,
    )

# Footer
st.markdown("---")
st.caption("Built with Streamlit")
