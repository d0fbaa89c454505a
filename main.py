"""Streamlit entrypoint for the hourly electricity price chart."""

from __future__ import annotations

import sys
from pathlib import Path

# --- Ensure src is on path for local imports ---
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

import pandas as pd
import streamlit as st

from elpris_dash import WINDOW_PRESETS, ChartDimensions, ChartSettings, ToggleSet  # noqa: E402
from elpris_dash.interaction import BoundingBox, PointerEvent, ScrubState  # noqa: E402
from elpris_dash.services import ChartEngine, get_tariffs, provider_from_settings  # noqa: E402
from elpris_dash.utils import DataRetrievalError, get_logger  # noqa: E402
from elpris_dash.viz import make_step_chart  # noqa: E402

logger = get_logger(__name__)

CHART_WIDTH = 900
CHART_HEIGHT = 420

TOGGLE_LABELS = {
    "with_market_price": "Markedspris",
    "with_elafgift": "Elafgift",
    "with_net_tarif": "Radius Nettarif",
    "with_vat": "Moms",
}


@st.cache_data(ttl=3600, show_spinner=False)
def load_tariffs_cached(data_csv: str | None, timezone: str) -> pd.DataFrame:
    settings = ChartSettings(timezone=timezone, data_csv=data_csv)
    return get_tariffs(provider_from_settings(settings))


def get_engine(settings: ChartSettings, tariffs: pd.DataFrame) -> ChartEngine:
    """One engine per browser session; the live fragment ticks its clock, so no timer thread is started."""
    engine: ChartEngine | None = st.session_state.get("engine")
    if engine is None:
        engine = ChartEngine(
            tariffs,
            ChartDimensions(width=CHART_WIDTH, height=CHART_HEIGHT, margins=settings.margins),
            settings=settings,
        )
        st.session_state.engine = engine
    elif engine.refresh_raw_series(tariffs):
        logger.info("Tariff data changed; chart series refreshed")
    return engine


def set_window(hours: int) -> None:
    st.session_state.engine.set_num_hours_shown(hours)


def render_controls(engine: ChartEngine) -> None:
    cols = st.columns(len(WINDOW_PRESETS))
    for col, (label, hours) in zip(cols, WINDOW_PRESETS.items()):
        col.button(
            label,
            on_click=set_window,
            args=(hours,),
            type="primary" if engine.num_hours_shown == hours else "secondary",
            use_container_width=True,
        )

    with st.expander("⚙️ Settings"):
        current = engine.toggles
        chosen = {}
        toggle_cols = st.columns(len(TOGGLE_LABELS))
        for col, (name, label) in zip(toggle_cols, TOGGLE_LABELS.items()):
            chosen[name] = col.toggle(label, value=getattr(current, name), key=f"toggle_{name}")
        toggles = ToggleSet(**chosen)
        if toggles != current:
            engine.set_toggles(toggles)


def apply_scrub(engine: ChartEngine) -> None:
    """Map the scrub slider onto pointer down/move/up events."""
    width = engine.dimensions.bounded_width
    engine.update_geometry(BoundingBox(left=0.0, right=width))

    scrubbing = st.toggle("Scrub", key="scrub_active")
    position = st.slider("Position", 0.0, float(width), float(width) / 2, disabled=not scrubbing, key="scrub_x")

    if scrubbing:
        kind = "move" if engine.scrub.state is ScrubState.DRAGGING else "down"
        engine.handle_pointer(PointerEvent(kind=kind, client_x=position))
    elif engine.scrub.state is ScrubState.DRAGGING:
        engine.handle_pointer(PointerEvent(kind="up", client_x=position))


def render_chart(engine: ChartEngine) -> None:
    instructions = engine.render()
    readout = engine.readout()

    head_left, head_right = st.columns([1, 1])
    head_left.metric(readout.unit, readout.price_text)
    head_right.markdown(f"### {readout.time_text}")

    st.plotly_chart(make_step_chart(instructions, height=CHART_HEIGHT), use_container_width=True)


def main() -> None:
    st.set_page_config(page_title="Elpris", layout="centered")
    settings = ChartSettings.from_env()

    try:
        tariffs = load_tariffs_cached(settings.data_csv, settings.timezone)
    except DataRetrievalError as err:
        logger.error(f"Tariff load failed: {err}")
        st.error(f"Failed to load tariffs: {err}")
        return

    engine = get_engine(settings, tariffs)

    render_controls(engine)
    apply_scrub(engine)

    @st.fragment(run_every=settings.tick_interval_seconds)
    def live_chart() -> None:
        engine.tick()
        render_chart(engine)

    live_chart()


if __name__ == "__main__":
    main()
