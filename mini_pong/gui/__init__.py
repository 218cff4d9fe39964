"""
PyGame host for Mini Pong: window, rendering and keyboard input
"""
