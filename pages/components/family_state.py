"""Session state helpers shared by the Streamlit pages."""

import logging

import streamlit as st

from gear_sizer.config import DATA_PATH
from gear_sizer.models import AppSettings
from gear_sizer.records import load_family, save_family

logger = logging.getLogger(__name__)


def get_settings() -> AppSettings:
    """Unit and display preferences for this session."""
    if "settings" not in st.session_state:
        st.session_state.settings = AppSettings()
    return st.session_state.settings


def read_family(path: str) -> tuple:
    """Return (members, gear, error) for the data file at `path`.

    A missing file is an empty family with no error. An unreadable file is
    an empty family plus the message to show.
    """
    try:
        members, gear = load_family(path)
    except FileNotFoundError:
        logger.info("No family data at %s", path)
        return [], [], None
    except ValueError as e:
        logger.error("Could not read family data at %s: %s", path, e)
        return [], [], f"Could not read {path}: {e}"
    return members, gear, None


def get_family() -> tuple:
    """Load (members, gear) once per session.

    A missing data file gives an empty family; the pages show how to
    create one.
    """
    if "members" not in st.session_state:
        members, gear, error = read_family(DATA_PATH)
        if error:
            st.error(f"❌ {error}")
        st.session_state.members = members
        st.session_state.gear = gear
    return st.session_state.members, st.session_state.gear


def add_gear_item(members: list, gear: list, item, path: str = DATA_PATH) -> None:
    """Append `item` to `gear` and save; the list is unchanged if the save fails."""
    gear.append(item)
    try:
        save_family(members, gear, path)
    except OSError:
        gear.remove(item)
        raise


def get_dismissed() -> set:
    if "dismissed_notifications" not in st.session_state:
        st.session_state.dismissed_notifications = set()
    return st.session_state.dismissed_notifications


def member_picker(members: list, label: str = "Family member"):
    """Selectbox over family members; returns the chosen member."""
    names = [m.name for m in members]
    choice = st.selectbox(label, range(len(members)), format_func=lambda i: names[i])
    return members[choice]
