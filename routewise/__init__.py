"""Top-level package for the RouteWise route-comparison engine.

This package exposes the modules used to turn a set of locations and
transport links into optimal routes: graph construction, label-setting
search over a chosen weight, and the service that compares the fastest,
cheapest and greenest alternatives between two named locations.
"""
