"""
HTTP layer of the Pokedex API.

``router`` aggregates the endpoint modules; ``deps`` holds the FastAPI
dependencies that decode request bodies and hand out the shared store.
"""
