# app.py

import datetime
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # ← Must precede any import depending on .env

import pandas as pd
import streamlit as st

from core.config import configure_logging, get_settings
from core.errors import TripPlannerError
from core.models import Itinerary
from core.planner import day_count
from core.session import SESSION_KEY, TripSession, regenerate, start_session

configure_logging(get_settings().log_level)

BUDGET_OPTIONS = {
    "low": "💰 Budget-friendly (Under $100/day)",
    "medium": "💳 Moderate ($100-300/day)",
    "high": "✨ Luxury ($300+/day)",
}
PACE_OPTIONS = {
    "relaxed": "🧘 Relaxed (2-3 activities/day)",
    "balanced": "⚖️ Balanced (4-5 activities/day)",
    "fast": "⚡ Fast-paced (6+ activities/day)",
}
INTEREST_OPTIONS = {
    "food": "🍜 Food & Cuisine",
    "history": "🏛️ History & Culture",
    "nightlife": "🌙 Nightlife",
    "adventure": "🏔️ Adventure",
    "shopping": "🛍️ Shopping",
    "outdoors": "🌲 Nature & Outdoors",
}

# ──────────────────────────────────────────────────────────────────────────────
# 0. Streamlit configuration
# ──────────────────────────────────────────────────────────────────────────────
st.set_page_config(page_title="AI Trip Planner", layout="wide")

# ──────────────────────────────────────────────────────────────────────────────
# 1. session_state initialisation
#    One slot holds the TripSession (request + itinerary); nothing else is
#    shared between the two views.
# ──────────────────────────────────────────────────────────────────────────────
st.session_state.setdefault(SESSION_KEY, None)
st.session_state.setdefault("error_message", "")


def show_error(error: TripPlannerError) -> None:
    if error.http_status == 400:
        st.session_state.error_message = f"🛑 {error.message.capitalize()}."
    elif error.http_status == 503:
        st.session_state.error_message = "⚠️ The AI service is unavailable. Please try again."
    else:
        st.session_state.error_message = f"⚠️ Invalid response from the AI ({error.message}). Please try again."


# ──────────────────────────────────────────────────────────────────────────────
# 2. Form view
# ──────────────────────────────────────────────────────────────────────────────
def render_form() -> Optional[dict]:
    """Draw the trip form; return the request payload once it is submitted."""
    today = datetime.date.today()
    with st.form("trip_form"):
        st.markdown("## 🧳 Plan your trip")
        destination = st.text_input("Where do you want to go? *", placeholder="e.g., Tokyo, Japan or Paris, France")
        c1, c2 = st.columns(2)
        start = c1.date_input("Start date *", today + datetime.timedelta(days=7), min_value=today)
        end = c2.date_input("End date *", today + datetime.timedelta(days=10), min_value=today)
        budget = st.radio("Budget level *", list(BUDGET_OPTIONS), format_func=BUDGET_OPTIONS.get, index=None)
        pace = st.radio("Travel pace *", list(PACE_OPTIONS), format_func=PACE_OPTIONS.get, index=None)
        interests = st.multiselect(
            "What interests you? (Select all that apply)",
            list(INTEREST_OPTIONS),
            format_func=INTEREST_OPTIONS.get,
        )
        submitted = st.form_submit_button("Generate My Itinerary")

    if not submitted:
        return None
    return {
        "destination": destination,
        "startDate": start.isoformat() if start else "",
        "endDate": end.isoformat() if end else "",
        "budget": budget or "",
        "pace": pace or "",
        "interests": interests,
    }


# ──────────────────────────────────────────────────────────────────────────────
# 3. Results view
# ──────────────────────────────────────────────────────────────────────────────
def render_itinerary(session: TripSession) -> None:
    req = session.request
    start = datetime.date.fromisoformat(req["startDate"])
    end = datetime.date.fromisoformat(req["endDate"])

    st.subheader(f"🗓️ Your itinerary for {req['destination']}")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Duration", f"{day_count(start, end)} days")
    c2.metric("Budget", req["budget"].capitalize())
    c3.metric("Pace", req["pace"].capitalize())
    c4.metric("Interests", ", ".join(req.get("interests") or []) or "—")

    try:
        itinerary = Itinerary.from_payload(session.itinerary)
    except (KeyError, TypeError) as e:
        st.error(f"❌ The itinerary is incomplete and cannot be displayed ({e}).")
        return

    for day in itinerary.days:
        try:
            label = datetime.date.fromisoformat(day.date).strftime("%A, %B %d, %Y")
        except ValueError:
            label = day.date
        with st.expander(label, expanded=True):
            df = pd.DataFrame(
                [{"Time": a.time, "Activity": a.title, "Details": a.description} for a in day.activities]
            )
            st.dataframe(df, hide_index=True, use_container_width=True)


# ──────────────────────────────────────────────────────────────────────────────
# 4. Page flow
# ──────────────────────────────────────────────────────────────────────────────
session: Optional[TripSession] = st.session_state[SESSION_KEY]

if session is None:
    payload = render_form()
    if payload is not None:
        st.session_state.error_message = ""
        with st.spinner("🤖 Generating your itinerary…"):
            new_session, result = start_session(payload)
        if new_session is None:
            show_error(result.error)
        else:
            st.session_state[SESSION_KEY] = new_session
            st.rerun()
else:
    st.sidebar.markdown("## 🗺️ Options")
    if st.sidebar.button("🔄 Regenerate"):
        st.session_state.error_message = ""
        with st.spinner("🔄 Regenerating…"):
            session, result = regenerate(session)
        if not result.ok:
            show_error(result.error)
        st.session_state[SESSION_KEY] = session
    if st.sidebar.button("➕ Plan another trip"):
        st.session_state[SESSION_KEY] = None
        st.session_state.error_message = ""
        st.rerun()
    render_itinerary(session)

if st.session_state.error_message:
    st.error(st.session_state.error_message)
