"""
Service layer.

``user_store`` holds users and answers lookups; ``user_service``
contains the business rules built on top of it.  Both return
``Result`` values for expected failures.
"""
