"""
The MODEL layer contains pure data structures and the data-to-visual mapping.
It has NO knowledge of the GUI (Qt).
It deals with the abundance table, row ordering, colors and bar geometry.
"""
