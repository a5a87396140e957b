"""
The VIEW layer draws frames with PyVista inside Qt widgets.
It only reads FrameSnapshots; it never mutates the simulation.
"""
