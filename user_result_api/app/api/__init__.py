"""
HTTP layer.

``router`` collects the endpoint routers, ``responses`` maps service
results to HTTP responses and ``dependencies`` wires the store and
service into request handlers.
"""
