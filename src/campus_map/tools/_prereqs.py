"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, campus: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, campus=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if campus and state.campus is None:
        raise ValueError(
            "Load campus data first with load_campus_data."
        )
