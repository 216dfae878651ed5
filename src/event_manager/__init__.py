"""Event Manager package.

Organized by feature modules (auth, candidates, points, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
