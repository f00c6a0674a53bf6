"""
Domain Layer - object creation examples organised by bounded context

- base/: Shared kernel (value objects, builder base, ports, Answer)
- core/: Domain exceptions
- nutrition/: Flat builder example
- pizza/: Hierarchical builders and covariant static factories
- student/: Named static factories and instance caching
"""
