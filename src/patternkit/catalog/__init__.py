"""Concrete design-pattern demonstrations built on patternkit's mechanics."""
