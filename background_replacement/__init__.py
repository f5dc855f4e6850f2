"""Background replacement bounded context (DDD layered package).

This package is intentionally split into:
- domain: value objects + pure services (extension filter, progress)
- ports: Protocol contracts for discovery and writing
- application: the replace use case (sync and async)
- infrastructure: filesystem adapters
- entrypoints: composition root used by CLIs and UIs

Use explicit imports for entrypoints:
`from background_replacement.entrypoints.replace_backgrounds import replace_backgrounds`
"""

__all__: list[str] = []
