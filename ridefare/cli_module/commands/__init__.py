"""Command groups for the RideFare CLI."""
