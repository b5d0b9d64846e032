"""Session engine: timers, scheduling, input and shutdown coordination."""
