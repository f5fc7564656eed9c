"""Navigation — branching history with classified navigation actions."""
