"""Service layer — counter snapshots and the tick driver.

Services may import from the domain and config layers.
They must never import from commands or output.
"""
