"""A command line first pomodoro timer: a socket-controlled server and its client commands."""

__version__ = "1.0.0"