import streamlit as st

from src.config.logging_config import configure_logging
from src.ui.layout import render_calculator


def main() -> None:
    configure_logging()
    st.set_page_config(
        page_title="Bitcoin Investment Calculator",
        page_icon="₿",
        layout="wide",
    )
    render_calculator()


if __name__ == "__main__":
    main()
