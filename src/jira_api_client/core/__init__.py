"""Transport, error, paging and option primitives."""

__all__: list[str] = []
