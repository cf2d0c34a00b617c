"""HTTP API for seasonteams."""
