"""Infrastructure layer — filesystem primitives.

Only this layer mutates the disk. Errors surface as
:class:`fsdgen.domain.errors.FilesystemError`.
"""
