"""Status banner for a pipeline pass in Streamlit pages."""

from __future__ import annotations

import streamlit as st


class PassReporter:
    """Shows the current pipeline stage, then a final success or error line."""

    def __init__(self, title: str):
        self._container = st.container()
        self._container.caption(title)
        self._stage = self._container.empty()
        self._done = False

    def callback(self, message: str, current: int | None = None, total: int | None = None) -> None:
        """Matches ``TicketService`` progress callbacks."""
        if self._done:
            return
        if current is not None and total:
            message = f"{message} ({current}/{total})"
        self._stage.write(message)

    def complete(self, message: str) -> None:
        if not self._done:
            self._stage.empty()
            self._container.success(message)
            self._done = True

    def error(self, message: str) -> None:
        if not self._done:
            self._stage.empty()
            self._container.error(message)
            self._done = True
