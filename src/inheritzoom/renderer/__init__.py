"""Graph consumers: HTML visualization and data export."""
