"""HTTP surface for the gate."""
