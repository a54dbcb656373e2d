"""
Unemployment calculation engine for the OPT Tracker.

Modules are imported directly (e.g. ``from calculator.engine import
evaluate_compliance``); nothing is re-exported here so that the models
package can depend on ``calculator.dates`` without import cycles.
"""
