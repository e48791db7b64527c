import streamlit as st
import pandas as pd

from .analyzer import summarize
from .config import load_settings
from .github_client import parse_username
from .logging_config import setup_logging
from .orchestrator import Mode, Phase, ProfileAcquirer

MODE_LABELS = {Mode.SYNTHETIC: "Demo data", Mode.REMOTE: "Live GitHub API"}


def _get_acquirer(settings) -> ProfileAcquirer:
    # one acquirer (and one RequestState) per browser session
    if "acquirer" not in st.session_state:
        st.session_state["acquirer"] = ProfileAcquirer.from_settings(settings)
    return st.session_state["acquirer"]


def run_app():
    settings = load_settings()
    setup_logging(settings.log_level)
    st.set_page_config(page_title="GitHub Profile Analytics", layout="wide")
    st.title("GitHub Profile Analytics")
    st.caption("Enter a GitHub username or profile URL, then click Analyze.")

    acquirer = _get_acquirer(settings)

    with st.sidebar:
        st.header("Config")
        username_input = st.text_input("GitHub username or profile URL", placeholder="octocat")
        modes = list(MODE_LABELS)
        mode = st.radio("Data source", modes, index=modes.index(Mode(settings.default_mode)),
                        format_func=MODE_LABELS.get)
        run_button = st.button("Analyze Profile")

    if run_button:
        with st.spinner("Fetching profile..."):
            acquirer.acquire(parse_username(username_input) if username_input.strip() else "", mode)

    state = acquirer.state
    if state.phase is Phase.IDLE:
        st.info("Enter a username and click Analyze Profile")
        return
    if state.phase is Phase.ERROR:
        st.error(state.error)
        return
    if state.phase is Phase.LOADING:
        st.info("Loading...")
        return

    profile = state.profile
    summary = summarize(state)
    cols = st.columns([1, 3])
    with cols[0]:
        if profile.avatar_url.startswith("http"):
            st.image(profile.avatar_url, width=160)
    with cols[1]:
        st.markdown(f"### {profile.name or profile.login}  \n@{profile.login}")
        if profile.bio:
            st.write(profile.bio)
        stats = st.columns(4)
        stats[0].metric("Repositories", profile.public_repos)
        stats[1].metric("Followers", profile.followers)
        stats[2].metric("Following", profile.following)
        stats[3].metric("Account age", summary.get("account_age") or "-")

    st.subheader("Commit activity (last 31 days)")
    activity_df = pd.DataFrame([p.to_dict() for p in state.activity])
    if not activity_df.empty:
        activity_df["date"] = pd.to_datetime(activity_df["date"])
        st.line_chart(activity_df.set_index("date")["count"])

    st.subheader("Repositories")
    if not state.repositories:
        st.warning("No public repos found for user.")
        return
    st.caption(f"Showing {len(state.repositories)} repositories for {profile.login}")
    df = pd.DataFrame([{
        "name": r.name,
        "language": r.language,
        "stars": r.stargazers_count,
        "forks": r.forks_count,
        "created": r.created_at.date().isoformat() if r.created_at else None,
        "url": r.html_url,
        "description": r.description or "",
    } for r in state.repositories])
    st.dataframe(df, use_container_width=True)

    if summary["languages"]:
        st.markdown("### Languages")
        st.bar_chart(pd.Series(summary["languages"], name="repositories"))
