"""
The MODEL layer contains the curve data structures and the collection logic.
It has NO knowledge of the console report; it deals with geometry only.
"""
