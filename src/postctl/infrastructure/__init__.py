"""Infrastructure layer — filesystem, templates, and the Site handle.

Reads and writes post files on disk. Parsing rules live in the domain
layer; this layer only moves bytes and resolves paths.
"""
