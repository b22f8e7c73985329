"""Runtime tooling: command line entry points and journal reports."""
