"""
The MODEL layer contains pure data structures and simulation logic.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with the attractor, the trail and the camera orbit.
"""
