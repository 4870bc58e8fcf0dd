"""
The MODEL layer contains the matrix type and the transforms built on it.
It has NO knowledge of how matrices are displayed beyond `str()`.
"""
