"""
The CONTROLLER layer drives the simulation in time.
It owns the Qt timer and hands each frame to the view.
"""
