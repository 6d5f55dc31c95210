"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, error policy). Keep Chado SQL in `chado/` and the
shaping logic in the corresponding feature package (e.g. `features/`).
"""
