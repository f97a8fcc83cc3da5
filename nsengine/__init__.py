"""Core building blocks of a small game engine: vectors, matrices, geometry, timers, easing, colours, events, input, logging, files and memory accounting."""

__version__ = "0.1.0"

__all__ = [
    "vec",
    "geometry",
    "mat4",
    "timer",
    "interp",
    "color",
    "console",
    "filesystem",
    "logger",
    "memory",
    "events",
    "input",
]