"""Terminal presentation helpers for statusclock."""
