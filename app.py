"""
Page Replacement Visualizer — FIFO, LRU & OPT

This application runs a page reference string through the classic Operating
System page replacement algorithms and visualizes:
    - Which accesses hit and which faulted
    - The contents of every physical frame after every step
    - Hits vs faults for all algorithms on the same reference string

Built with Streamlit for the web interface and Plotly for visualizations.
The simulation itself lives in engine.py.
"""

# =============================================================================
# IMPORTS
# =============================================================================

import streamlit as st                       # Web application framework

from engine import ReplacementPolicy, simulate
from utils import (
    DEFAULT_FRAMES,
    DEFAULT_POLICY,
    DEFAULT_TRACE,
    MAX_RANDOM_PAGE,
    build_comparison_figure,
    build_history_figure,
    build_outcome_figure,
    compare_policies,
    generate_trace,
    parse_trace,
)


# Configure the Streamlit page
st.set_page_config(page_title="Page Replacement Visualizer", layout="wide")

# -----------------------------------------------------------------------------
# SIDEBAR NAVIGATION
# -----------------------------------------------------------------------------

# Page selector for switching between Simulator and Concepts views
page = st.sidebar.radio("Choose View", ["Simulator", "Concepts"])

st.title("Page Replacement Visualizer — FIFO, LRU & OPT")

# =============================================================================
# CONCEPTS PAGE - Educational Content
# =============================================================================

if page == "Concepts":
    st.header("Page Replacement Concepts")
    st.markdown(
        """
        ### **Page Fault**
        - Occurs when a referenced page is not resident in any frame.
        - If a frame is free the page is loaded there, otherwise a victim must be evicted.

        ### **FIFO (First In First Out)**
        - Evict the page that entered memory earliest.
        - Re-using a page does not protect it.
        - Can suffer from **Belady's anomaly**: more frames, more faults.

        ### **LRU (Least Recently Used)**
        - Evict the page that hasn't been used for the longest time.

        ### **OPT (Optimal)**
        - Evict the page whose next use is furthest in the future, or never.
        - Needs the whole reference string up front, so it is a benchmark rather than a real policy.
        - Gives the minimum possible number of faults.
        """
    )
    st.stop()  # Stop rendering - don't show simulator on Concepts page

# -----------------------------------------------------------------------------
# SIDEBAR - Simulation Settings
# -----------------------------------------------------------------------------

st.sidebar.header("Simulation Settings")

frame_count = st.sidebar.number_input(
    "Frames",
    min_value=0,
    max_value=32,
    value=DEFAULT_FRAMES,
    step=1
)

policy_name = st.sidebar.selectbox(
    "Replacement Policy",
    options=list(ReplacementPolicy.ALL),
    index=ReplacementPolicy.ALL.index(DEFAULT_POLICY)
)

st.sidebar.markdown("---")

# -----------------------------------------------------------------------------
# SIDEBAR - Reference String
# -----------------------------------------------------------------------------

st.sidebar.header("Reference String")

# Keep the trace in session state so the random generator can replace it
if "trace_text" not in st.session_state:
    st.session_state.trace_text = DEFAULT_TRACE

random_length = st.sidebar.number_input("Random length", min_value=1, max_value=200, value=20)
random_max_page = st.sidebar.number_input("Largest page number", min_value=0, value=MAX_RANDOM_PAGE)

if st.sidebar.button("Generate Random"):
    trace = generate_trace(int(random_length), int(random_max_page))
    st.session_state.trace_text = " ".join(map(str, trace))

access_input = st.sidebar.text_area(
    "Page access sequence (space or comma separated page numbers)",
    key="trace_text"
)

try:
    accesses = parse_trace(access_input)
except ValueError as e:
    st.sidebar.error(str(e))
    st.stop()

if len(accesses) == 0:
    st.warning("No pages to run")
    st.stop()

# =============================================================================
# SIMULATION
# =============================================================================

policy = simulate(policy_name, int(frame_count), accesses)
stats = policy.get_stats()

# =============================================================================
# MAIN CONTENT AREA - Two Column Layout
# =============================================================================

col1, col2 = st.columns([1, 2])

# -----------------------------------------------------------------------------
# LEFT COLUMN - Statistics and Event Log
# -----------------------------------------------------------------------------

with col1:
    st.subheader("Statistics")
    st.metric("Page Accesses", stats['total_refs'])
    st.metric("Page Faults", stats['faults'])
    st.metric("Hit Ratio", stats['hit_ratio'])

    # Display event log (most recent 20 events, newest first)
    st.subheader("Event Log")
    for ev in policy.event_log[-20:][::-1]:
        st.write(ev)

# -----------------------------------------------------------------------------
# RIGHT COLUMN - Visualizations
# -----------------------------------------------------------------------------

with col2:
    # ----- Hit / Miss Strip -----
    st.subheader(f"Accesses ({policy_name})")
    st.caption("Green = hit, red = fault")
    st.plotly_chart(build_outcome_figure(policy.results), use_container_width=True)

    # ----- Frame History Grid -----
    st.subheader("Frame History")
    if policy.frame_count == 0:
        st.write("No frames — every access faults")
    else:
        st.plotly_chart(build_history_figure(policy), use_container_width=True)

    # ----- Policy Comparison -----
    st.subheader("All Policies")
    st.plotly_chart(
        build_comparison_figure(compare_policies(int(frame_count), accesses)),
        use_container_width=True
    )

# =============================================================================
# FOOTER - Usage Tips and Examples
# =============================================================================

st.markdown("---")
st.markdown(
    "**Instructor examples**:\n"
    "1) Belady's anomaly: FIFO on `1 2 3 4 1 2 5 1 2 3 4 5` faults 9 times with 3 frames "
    "but 10 times with 4 frames.\n"
    "2) LRU vs FIFO: run `1 2 3 1 4` with 3 frames and compare which page is evicted."
)
