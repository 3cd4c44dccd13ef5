"""
Application package for the Weather Forecast API.

The code is split into layers: ``core`` (settings, logging, database),
``repositories`` (SQL access), ``services`` (business rules) and
``api`` (HTTP routes).  ``main.create_app`` wires them together.
"""
