"""Simple Time Clock package.

Feature modules (users, timeclock, reports) each hold a model, a service and
a thin Flask controller; persistence sits behind repository protocols.
"""
