"""Monster explorer: standalone NiceGUI page over a monster statistics CSV.

Run:
    MONSTERSTATS_CSV=path/to/monsters.csv python -m monsterstats.explorer_app.app

Env vars:
    MONSTERSTATS_CSV: CSV to load (required)
    MONSTERSTATS_GUI_NATIVE: 1/0 (default 0)
    MONSTERSTATS_GUI_RELOAD: 1/0 (default 0)
    HOST: bind host (default 127.0.0.1 native, 0.0.0.0 web)
    PORT: bind port (default 8080)
"""

from __future__ import annotations

import os
from typing import Optional

from nicegui import ui

from monsterstats.column_helpers import categorical_candidates, numeric_columns
from monsterstats.errors import MonsterStatsError
from monsterstats.explorer_app import charts
from monsterstats.plotting.plot_style import PlotStyle
from monsterstats.plotting.style_config import StyleConfig
from monsterstats.table import MonsterTable
from monsterstats.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

CSV_ENV = "MONSTERSTATS_CSV"


def _env_bool(name: str, default: bool) -> bool:
    """Parse env var as bool; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    """Parse env var as int; if unset/invalid returns default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _pick(options: list[str], preferred: str) -> Optional[str]:
    """preferred if present in options, else the first option (or None)."""
    if preferred in options:
        return preferred
    return options[0] if options else None


def build_explorer(table: MonsterTable, style: PlotStyle) -> None:
    """Build the explorer widgets for table inside the current container."""
    categorical = categorical_candidates(table)
    numeric = numeric_columns(table)

    with ui.expansion(f"Columns ({len(table.column_names)})").classes("w-full"):
        ui.label(", ".join(table.column_names)).classes("select-text")

    # --- counts (bar / pie) ---
    with ui.row().classes("items-end gap-4"):
        count_col = ui.select(categorical, value=_pick(categorical, "size"), label="Category")
        count_kind = ui.select([t.value for t in charts.COUNT_PLOT_TYPES], value="bar", label="Chart")
    count_plot = ui.plotly({}).classes("w-full")

    def _refresh_counts() -> None:
        if not count_col.value:
            return
        try:
            count_plot.figure = charts.count_chart(table, count_col.value, count_kind.value, style)
            count_plot.update()
        except MonsterStatsError as e:
            logger.warning(f"count chart failed: {e}")
            ui.notify(str(e), type="negative")

    count_col.on_value_change(lambda _: _refresh_counts())
    count_kind.on_value_change(lambda _: _refresh_counts())

    # --- distributions (box / violin) ---
    with ui.row().classes("items-end gap-4"):
        group_col = ui.select(categorical, value=_pick(categorical, "size"), label="Group by")
        value_col = ui.select(numeric, value=_pick(numeric, "hp"), label="Value")
        dist_kind = ui.select([t.value for t in charts.DISTRIBUTION_PLOT_TYPES], value="box", label="Chart")
    dist_plot = ui.plotly({}).classes("w-full")

    def _refresh_distribution() -> None:
        if not group_col.value or not value_col.value:
            return
        try:
            dist_plot.figure = charts.distribution_chart(
                table, group_col.value, value_col.value, dist_kind.value, style
            )
            dist_plot.update()
        except MonsterStatsError as e:
            logger.warning(f"distribution chart failed: {e}")
            ui.notify(str(e), type="negative")

    for sel in (group_col, value_col, dist_kind):
        sel.on_value_change(lambda _: _refresh_distribution())

    # --- name filter, random row, hit chance ---
    has_hit_columns = table.has_column("name") and table.has_column("ac")
    with ui.row().classes("items-end gap-4"):
        name_pattern = ui.input("Name regex")
        modifier = ui.number("Attack modifier", value=0, step=1, format="%d")
        ui.button("Random monster", on_click=lambda: _show_random_row())
    random_label = ui.label("").classes("select-text")
    hit_table = ui.table(columns=[], rows=[], row_key="name").classes("w-full")

    def _refresh_hit_table() -> None:
        if not has_hit_columns:
            return
        try:
            subset = table.filter_regex("name", name_pattern.value) if name_pattern.value else table
            df = charts.hit_chance_table(subset, int(modifier.value or 0))
        except MonsterStatsError as e:
            ui.notify(str(e), type="negative")
            return
        hit_table.columns = [{"name": c, "label": c, "field": c, "sortable": True} for c in df.columns]
        hit_table.rows = charts.to_ui_rows(df)
        hit_table.update()

    def _show_random_row() -> None:
        try:
            row = table.sample_row()
        except MonsterStatsError as e:
            ui.notify(str(e), type="negative")
            return
        random_label.text = ", ".join(f"{k}={v}" for k, v in row.items())

    name_pattern.on_value_change(lambda _: _refresh_hit_table())
    modifier.on_value_change(lambda _: _refresh_hit_table())

    _refresh_counts()
    _refresh_distribution()
    _refresh_hit_table()


@ui.page("/")
def home() -> None:
    """Home page: load MONSTERSTATS_CSV and build the explorer."""
    ui.page_title("Monster Explorer")
    with ui.column().classes("w-full gap-4 p-4"):
        csv_path = os.getenv(CSV_ENV)
        if not csv_path:
            ui.label(f"Set {CSV_ENV} to the monster CSV path.").classes("text-negative")
            return
        try:
            table = MonsterTable.from_csv(csv_path)
        except FileNotFoundError:
            ui.label(f"{csv_path} not found.").classes("text-negative")
            return
        style = StyleConfig.load().get_style()
        build_explorer(table, style)


def main(*, reload: bool | None = None, native_bool: bool | None = None) -> None:
    """Start the explorer application."""
    configure_logging()
    native_bool = _env_bool("MONSTERSTATS_GUI_NATIVE", False) if native_bool is None else native_bool
    reload = _env_bool("MONSTERSTATS_GUI_RELOAD", False) if reload is None else reload
    port = _env_int("PORT", 8080)
    host = os.getenv("HOST", "127.0.0.1" if native_bool else "0.0.0.0")

    logger.info("Starting Monster Explorer: host=%s port=%s reload=%s native=%s", host, port, reload, native_bool)
    ui.run(host=host, port=port, reload=reload, native=native_bool, title="Monster Explorer")


if __name__ in {"__main__", "__mp_main__"}:
    main()
