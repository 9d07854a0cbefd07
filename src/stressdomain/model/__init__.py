"""
The MODEL layer contains pure data structures and lookup logic.
It has NO knowledge of the GUI (Qt).
It deals with palettes, fault regimes, plot geometry and the sample grid.
"""
