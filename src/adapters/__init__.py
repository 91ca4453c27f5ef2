"""Adapters: everything that talks to the operating system."""
